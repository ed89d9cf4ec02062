"""Tests for the authentication routes."""
import pytest
from fastapi import status

from app.core.config import settings

PASSWORD = "Str0ngP@ssword!"
LOGIN_URL = f"{settings.API_STR}/auth/login"


@pytest.mark.asyncio
@pytest.mark.parametrize("username, password, expected_status", [
    ("alice", PASSWORD, status.HTTP_200_OK),
    ("alice", "wrong", status.HTTP_401_UNAUTHORIZED),
    ("nobody", PASSWORD, status.HTTP_401_UNAUTHORIZED),
])
async def test_login(client, author, username, password, expected_status):  # pylint: disable=unused-argument
    """Login with the OAuth2 password form."""
    response = await client.post(LOGIN_URL, data={
        "grant_type": "password",
        "username": username,
        "password": password,
    })
    assert response.status_code == expected_status
    if expected_status == status.HTTP_200_OK:
        assert response.json()["token_type"] == "bearer"


@pytest.mark.asyncio
async def test_login_then_me(client, author):
    """The token handed out at login identifies the author."""
    response = await client.post(LOGIN_URL, data={
        "grant_type": "password", "username": "alice", "password": PASSWORD})
    token = response.json()["access_token"]

    response = await client.get(
        f"{settings.API_STR}/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["id"] == author.id
    assert response.json()["roles"] == ["user"]


@pytest.mark.asyncio
@pytest.mark.parametrize("headers", [
    {},
    {"Authorization": "Bearer not-a-token"},
])
async def test_me_unauthorized(client, headers):
    """A missing or invalid token is refused."""
    response = await client.get(f"{settings.API_STR}/auth/me", headers=headers)
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.asyncio
async def test_token_of_deleted_author(client, author, author_headers):
    """The token of a deleted author is refused."""
    response = await client.delete(f"{settings.API_STR}/author/{author.id}", headers=author_headers)
    assert response.status_code == status.HTTP_200_OK
    response = await client.get(f"{settings.API_STR}/auth/me", headers=author_headers)
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
