"""This module contains the business logic of the announcements."""
from fastapi.exceptions import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import transactional
from app.db_objects.announcement import (
    delete_announcement, delete_by_heading as _delete_by_heading,
    delete_no_active_announcements, find_announcement, get_nb_announcements,
    get_some_pagination, save_announcement, update_announcement,
)
from app.db_objects.db_models import Announcement
from app.db_objects.heading import get_heading
from app.templates.schemas.announcement import AnnouncementCreate, AnnouncementRead, AnnouncementUpdate


async def _check_heading(db: AsyncSession, heading_id: int) -> None:
    if await get_heading(db, heading_id) is None:
        raise HTTPException(status_code=404, detail="Heading not found")


@transactional
async def save(db: AsyncSession, announcement: AnnouncementCreate, author_id: int) -> AnnouncementRead:
    """
    Publish a new announcement for an author.

    The authors whose suitable ads match the announcement are notified by email.

    :param AsyncSession db: The current database session.
    :param AnnouncementCreate announcement: The announcement to publish.
    :param int author_id: The ID of the author of the announcement.
    :return AnnouncementRead: The published announcement.
    :raises HTTPException: 404 if the heading does not exist.
    """
    await _check_heading(db, announcement.heading_id)
    db_announcement = Announcement(**announcement.model_dump(), author_id=author_id)
    await save_announcement(db, db_announcement)
    return AnnouncementRead.model_validate(db_announcement)


async def find(db: AsyncSession, announcement_id: int) -> AnnouncementRead | None:
    """
    Find an announcement by its ID.

    :param AsyncSession db: The current database session.
    :param int announcement_id: The ID of the announcement.
    :return AnnouncementRead | None: The announcement, None if it does not exist.
    """
    db_announcement = await find_announcement(db, announcement_id)
    if db_announcement is None:
        return None
    return AnnouncementRead.model_validate(db_announcement)


async def get_page(db: AsyncSession, page: int, size: int) -> list[AnnouncementRead]:
    """
    Get one page of announcements.

    :param AsyncSession db: The current database session.
    :param int page: The zero-based index of the page.
    :param int size: The maximum number of announcements in the page.
    :return list[AnnouncementRead]: The announcements of the page.
    """
    return [
        AnnouncementRead.model_validate(db_announcement)
        for db_announcement in await get_some_pagination(db, page, size)
    ]


async def count(db: AsyncSession) -> int:
    """Get the number of announcements."""
    return await get_nb_announcements(db)


@transactional
async def update(
    db: AsyncSession,
    announcement_id: int,
    announcement: AnnouncementUpdate
) -> AnnouncementRead | None:
    """
    Update an announcement.

    :param AsyncSession db: The current database session.
    :param int announcement_id: The ID of the announcement.
    :param AnnouncementUpdate announcement: The new data of the announcement.
    :return AnnouncementRead | None: The updated announcement, None if it does not exist.
    :raises HTTPException: 404 if the new heading does not exist.
    """
    db_announcement = await find_announcement(db, announcement_id)
    if db_announcement is None:
        return None
    announcement_data = announcement.model_dump(exclude_unset=True, exclude_none=True)
    if "heading_id" in announcement_data:
        await _check_heading(db, announcement_data["heading_id"])
    await update_announcement(db, db_announcement, announcement_data)
    return AnnouncementRead.model_validate(db_announcement)


@transactional
async def delete(db: AsyncSession, announcement_id: int) -> bool:
    """
    Delete an announcement.

    :param AsyncSession db: The current database session.
    :param int announcement_id: The ID of the announcement.
    :return bool: True if the announcement existed.
    """
    return await delete_announcement(db, announcement_id)


@transactional
async def delete_by_heading(db: AsyncSession, heading_id: int) -> int:
    """
    Delete all the announcements of a heading, keeping the heading.

    :param AsyncSession db: The current database session.
    :param int heading_id: The ID of the heading.
    :return int: The number of deleted announcements.
    """
    return await _delete_by_heading(db, heading_id)


@transactional
async def delete_inactive(db: AsyncSession) -> int:
    """
    Purge the inactive announcements.

    :param AsyncSession db: The current database session.
    :return int: The number of deleted announcements.
    """
    return await delete_no_active_announcements(db)
