"""Tests for the functions interacting with the announcements table."""
import pytest

from app.db_objects.announcement import (
    delete_all_from_heading, delete_announcement, delete_announcement_by_id,
    delete_by_heading, delete_no_active_announcements, find_announcement,
    get_nb_announcements, get_some_pagination, save_announcement, update_announcement,
)
from app.db_objects.db_models import Announcement, Heading


@pytest.fixture
def make_announcement(author, heading):
    """Build unsaved announcements of the regular author."""
    def _make(title: str, active: bool = True, heading_id: int | None = None) -> Announcement:
        return Announcement(
            title=title,
            description=f"{title} for sale",
            price=10.0,
            active=active,
            author_id=author.id,
            heading_id=heading_id or heading.id,
        )
    return _make


@pytest.mark.asyncio
async def test_save_then_find(db, make_announcement, mock_send_email):
    """A saved announcement is found back, active by default."""
    db_announcement = await save_announcement(db, make_announcement("Bike"))
    await db.commit()

    found = await find_announcement(db, db_announcement.id)
    assert found.title == "Bike"
    assert found.active is True
    assert found.created_at > 0
    mock_send_email.assert_not_called()


@pytest.mark.asyncio
async def test_find_missing_announcement(db):
    """Finding an unknown ID returns None."""
    assert await find_announcement(db, 404) is None


@pytest.mark.asyncio
async def test_update_announcement(db, make_announcement, mock_send_email):  # pylint: disable=unused-argument
    """Updated fields are merged into the announcement."""
    db_announcement = await save_announcement(db, make_announcement("Bike"))
    await update_announcement(db, db_announcement, {"price": 5.5, "active": False})
    await db.commit()

    found = await find_announcement(db, db_announcement.id)
    assert found.price == 5.5
    assert found.active is False
    assert found.title == "Bike"


@pytest.mark.asyncio
@pytest.mark.parametrize("delete_function", [delete_announcement, delete_announcement_by_id])
async def test_delete_announcement(db, make_announcement, delete_function):
    """Both delete forms remove only the given announcement."""
    first, second = make_announcement("Bike"), make_announcement("Car")
    db.add_all([first, second])
    await db.commit()
    first_id, second_id = first.id, second.id

    assert await delete_function(db, first_id)
    await db.commit()
    db.expire_all()
    assert await find_announcement(db, first_id) is None
    assert await find_announcement(db, second_id) is not None
    assert not await delete_function(db, first_id)


@pytest.mark.asyncio
@pytest.mark.parametrize("delete_function", [delete_by_heading, delete_all_from_heading])
async def test_delete_by_heading(db, make_announcement, delete_function):
    """Both delete-by-heading forms keep the announcements of the other headings."""
    other_heading = Heading(name="Real estate")
    db.add(other_heading)
    await db.flush()
    db.add_all([
        make_announcement("Bike"),
        make_announcement("Car"),
        make_announcement("Flat", heading_id=other_heading.id),
    ])
    await db.commit()

    heading_id = (await get_some_pagination(db, 0, 1))[0].heading_id
    assert await delete_function(db, heading_id) == 2
    await db.commit()
    remaining = await get_some_pagination(db, 0, 10)
    assert [a.title for a in remaining] == ["Flat"]


@pytest.mark.asyncio
async def test_purge_only_inactive(db, make_announcement):
    """The purge removes the inactive announcements and keeps the active ones."""
    db.add_all([
        make_announcement("Bike"),
        make_announcement("Car", active=False),
        make_announcement("Boat", active=False),
        make_announcement("Van"),
    ])
    await db.commit()

    assert await delete_no_active_announcements(db) == 2
    await db.commit()
    remaining = await get_some_pagination(db, 0, 10)
    assert [a.title for a in remaining] == ["Bike", "Van"]
    assert all(a.active for a in remaining)
    assert await delete_no_active_announcements(db) == 0


@pytest.mark.asyncio
async def test_pagination(db, make_announcement):
    """Pages hold at most `size` announcements, ordered by ID."""
    db.add_all([make_announcement(f"Item {i}") for i in range(5)])
    await db.commit()

    assert await get_nb_announcements(db) == 5
    first_page = await get_some_pagination(db, 0, 2)
    assert [a.title for a in first_page] == ["Item 0", "Item 1"]
    last_page = await get_some_pagination(db, 2, 2)
    assert [a.title for a in last_page] == ["Item 4"]
    assert await get_some_pagination(db, 3, 2) == []


@pytest.mark.asyncio
@pytest.mark.parametrize("page, size", [(-1, 10), (0, 0), (0, -5)])
async def test_pagination_invalid_arguments(db, page, size):
    """A negative page or a size lower than one is refused."""
    with pytest.raises(ValueError):
        await get_some_pagination(db, page, size)
