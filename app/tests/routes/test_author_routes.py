"""Tests for the author routes."""
import pytest
from fastapi import status

from app.core.config import settings

AUTHOR_URL = f"{settings.API_STR}/author"
NEW_AUTHOR = {
    "name": "carol",
    "first_name": "Carol",
    "password": "Str0ngP@ssword!",
    "emails": [{"email": "carol@example.com"}],
    "addresses": [{"country": "France", "city": "Lyon"}],
}


@pytest.mark.asyncio
async def test_register_and_read(client):
    """A registered author can be read back, without its password."""
    response = await client.post(f"{AUTHOR_URL}/", json=NEW_AUTHOR)
    assert response.status_code == status.HTTP_200_OK
    author = response.json()
    assert author["roles"] == ["user"]
    assert "password" not in author
    assert author["addresses"] == [{"country": "France", "city": "Lyon", "street": None}]

    response = await client.get(f"{AUTHOR_URL}/{author['id']}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["name"] == "carol"


@pytest.mark.asyncio
async def test_register_duplicate_name(client):
    """Names are unique."""
    await client.post(f"{AUTHOR_URL}/", json=NEW_AUTHOR)
    response = await client.post(f"{AUTHOR_URL}/", json=NEW_AUTHOR)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "already exists" in response.json()["detail"]


@pytest.mark.asyncio
async def test_read_missing_author(client):
    response = await client.get(f"{AUTHOR_URL}/404")
    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_list_authors(client, author, other_author, author_headers):  # pylint: disable=unused-argument
    """Logged in authors can list the authors."""
    assert (await client.get(f"{AUTHOR_URL}/")).status_code == status.HTTP_401_UNAUTHORIZED
    response = await client.get(f"{AUTHOR_URL}/", headers=author_headers)
    assert [a["name"] for a in response.json()] == ["alice", "bob"]


@pytest.mark.asyncio
@pytest.mark.parametrize("requester, expected_status", [
    ("author", status.HTTP_200_OK),
    ("admin", status.HTTP_200_OK),
    ("other", status.HTTP_403_FORBIDDEN),
])
async def test_update_author(
    client, author, author_headers, admin_headers, other_headers, requester, expected_status
):
    """Only the author itself or an admin can update an author."""
    headers = {
        "author": author_headers,
        "admin": admin_headers,
        "other": other_headers,
    }[requester]
    response = await client.put(
        f"{AUTHOR_URL}/{author.id}", headers=headers, json={"last_name": "Liddell"})
    assert response.status_code == expected_status
    if expected_status == status.HTTP_200_OK:
        assert response.json()["last_name"] == "Liddell"
        assert response.json()["emails"] == [{"email": "alice@example.com"}]


@pytest.mark.asyncio
async def test_rename_invalidates_tokens(client, author, author_headers):
    """Tokens are issued to a name, renaming an author requires a new login."""
    response = await client.put(
        f"{AUTHOR_URL}/{author.id}", headers=author_headers, json={"name": "alice_renamed"})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["name"] == "alice_renamed"

    response = await client.get(f"{settings.API_STR}/auth/me", headers=author_headers)
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    response = await client.post(f"{settings.API_STR}/auth/login", data={
        "grant_type": "password", "username": "alice_renamed", "password": "Str0ngP@ssword!"})
    assert response.status_code == status.HTTP_200_OK


@pytest.mark.asyncio
async def test_update_missing_author(client, admin_headers):
    response = await client.put(f"{AUTHOR_URL}/404", headers=admin_headers, json={"last_name": "X"})
    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_delete_author_cascades(client, author, heading, author_headers, other_headers, mock_send_email):  # pylint: disable=unused-argument
    """An author deletes itself together with its announcements and suitable ads."""
    response = await client.post(f"{settings.API_STR}/announcement/", headers=author_headers, json={
        "title": "Bike", "heading_id": heading.id})
    announcement_id = response.json()["id"]
    await client.post(f"{settings.API_STR}/suitable-ad/", headers=author_headers, json={"keyword": "car"})

    response = await client.delete(f"{AUTHOR_URL}/{author.id}", headers=other_headers)
    assert response.status_code == status.HTTP_403_FORBIDDEN
    response = await client.delete(f"{AUTHOR_URL}/{author.id}", headers=author_headers)
    assert response.status_code == status.HTTP_200_OK

    assert (await client.get(f"{AUTHOR_URL}/{author.id}")).status_code == status.HTTP_404_NOT_FOUND
    response = await client.get(f"{settings.API_STR}/announcement/{announcement_id}")
    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_delete_author_announcements(client, author, heading, author_headers, mock_send_email):  # pylint: disable=unused-argument
    """An author can delete all of its announcements at once."""
    for title in ("Bike", "Car"):
        await client.post(f"{settings.API_STR}/announcement/", headers=author_headers, json={
            "title": title, "heading_id": heading.id})

    response = await client.delete(f"{AUTHOR_URL}/{author.id}/announcements", headers=author_headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"deleted": 2}
    assert (await client.get(f"{AUTHOR_URL}/{author.id}")).status_code == status.HTTP_200_OK
