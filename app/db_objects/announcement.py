"""
This module contains the functions to interact with the announcements table in the database.

Besides the CRUD functions, it holds the delete statements used by the cascades
(by heading), the purge of the inactive announcements and the paginated listing.
"""
from typing import Any
from sqlalchemy import delete, func, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import logger
from app.db_objects.db_models import Announcement
from app.db_objects.suitable_ad import search_emails_for_sending_email


# ~~~~~ CRUD ~~~~~ #


# ------- Create ------- #


async def save_announcement(db: AsyncSession, db_announcement: Announcement) -> Announcement:
    """
    Store an announcement, then notify the authors whose suitable ads match it.

    :param AsyncSession db: The current database session.
    :param Announcement db_announcement: The announcement to store.
    :return Announcement: The stored announcement, with its generated ID.
    """
    db.add(db_announcement)
    await db.flush()
    await search_emails_for_sending_email(db, db_announcement)
    return db_announcement


# ------- Read ------- #


async def find_announcement(db: AsyncSession, announcement_id: int) -> Announcement | None:
    """
    Retrieve an announcement by its ID.

    :param AsyncSession db: The current database session.
    :param int announcement_id: The ID of the announcement.
    :return Announcement | None: The announcement if found, else None.
    """
    result = await db.execute(
        select(Announcement).where(Announcement.id == announcement_id)
    )
    return result.scalars().first()


async def get_some_pagination(db: AsyncSession, page: int, size: int) -> list[Announcement]:
    """
    Get one page of announcements.

    :param AsyncSession db: The current database session.
    :param int page: The zero-based index of the page.
    :param int size: The maximum number of announcements in the page.
    :return list[Announcement]: The announcements of the page, ordered by ID.
    :raises ValueError: If `page` is negative or `size` is lower than one.
    """
    if page < 0:
        raise ValueError("Page index must not be less than zero")
    if size < 1:
        raise ValueError("Page size must not be less than one")
    result = await db.execute(
        select(Announcement)
        .order_by(Announcement.id)
        .offset(page * size)
        .limit(size)
    )
    return list(result.scalars().all())


async def get_nb_announcements(db: AsyncSession) -> int:
    """
    Get the number of announcements.

    :param AsyncSession db: The current database session.
    :return int: The number of announcements.
    """
    result = await db.execute(select(func.count()).select_from(Announcement))
    return int(result.scalar_one())


# ------- Update ------- #


async def update_announcement(
    db: AsyncSession,
    db_announcement: Announcement,
    announcement_data: dict[str, Any]
) -> Announcement:
    """
    Merge new values into an existing announcement.

    :param AsyncSession db: The current database session.
    :param Announcement db_announcement: The announcement to update.
    :param dict announcement_data: The attributes to set on the announcement.
    :return Announcement: The updated announcement.
    """
    for key, value in announcement_data.items():
        setattr(db_announcement, key, value)
    db.add(db_announcement)
    await db.flush()
    return db_announcement


# ------- Delete ------- #


async def delete_announcement(db: AsyncSession, announcement_id: int) -> bool:
    """
    Delete an announcement by its ID.

    :param AsyncSession db: The current database session.
    :param int announcement_id: The ID of the announcement.
    :return bool: True if a row was deleted.
    """
    result = await db.execute(
        delete(Announcement).where(Announcement.id == announcement_id)
    )
    return result.rowcount > 0


async def delete_announcement_by_id(db: AsyncSession, announcement_id: int) -> bool:
    """
    Delete an announcement by its ID with a textual statement.

    :param AsyncSession db: The current database session.
    :param int announcement_id: The ID of the announcement.
    :return bool: True if a row was deleted.
    """
    result = await db.execute(
        text(f"DELETE FROM {Announcement.__tablename__} WHERE id = :id"),
        {"id": announcement_id}
    )
    return result.rowcount > 0


async def delete_by_heading(db: AsyncSession, heading_id: int) -> int:
    """
    Delete all the announcements of a heading with a textual statement.

    :param AsyncSession db: The current database session.
    :param int heading_id: The ID of the heading.
    :return int: The number of deleted announcements.
    """
    result = await db.execute(
        text(f"DELETE FROM {Announcement.__tablename__} WHERE heading_id = :id"),
        {"id": heading_id}
    )
    return result.rowcount


async def delete_all_from_heading(db: AsyncSession, heading_id: int) -> int:
    """
    Delete all the announcements of a heading.

    :param AsyncSession db: The current database session.
    :param int heading_id: The ID of the heading.
    :return int: The number of deleted announcements.
    """
    result = await db.execute(
        delete(Announcement).where(Announcement.heading_id == heading_id)
    )
    return result.rowcount


async def delete_no_active_announcements(db: AsyncSession) -> int:
    """
    Purge the announcements marked as inactive.

    :param AsyncSession db: The current database session.
    :return int: The number of deleted announcements.
    """
    result = await db.execute(
        delete(Announcement).where(Announcement.active.is_(False))
    )
    logger.info(f"{result.rowcount} inactive announcement(s) purged")
    return result.rowcount
