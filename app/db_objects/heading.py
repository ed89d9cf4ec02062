"""This module contains the functions to interact with the headings table in the database."""
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import logger
from app.db_objects.announcement import delete_all_from_heading
from app.db_objects.db_models import Heading


async def create_heading(db: AsyncSession, db_heading: Heading) -> Heading:
    """
    Store a new heading.

    :param AsyncSession db: The current database session.
    :param Heading db_heading: The heading to store.
    :return Heading: The stored heading, with its generated ID.
    """
    db.add(db_heading)
    await db.flush()
    return db_heading


async def get_heading(db: AsyncSession, heading_id: int) -> Heading | None:
    """
    Retrieve a heading by its ID.

    :param AsyncSession db: The current database session.
    :param int heading_id: The ID of the heading.
    :return Heading | None: The heading if found, else None.
    """
    return await db.get(Heading, heading_id)


async def get_headings(db: AsyncSession) -> list[Heading]:
    """
    Get all the headings, ordered by name.

    :param AsyncSession db: The current database session.
    :return list[Heading]: The headings.
    """
    result = await db.execute(select(Heading).order_by(Heading.name))
    return list(result.scalars().all())


async def update_heading(db: AsyncSession, db_heading: Heading, name: str) -> Heading:
    """
    Rename a heading.

    :param AsyncSession db: The current database session.
    :param Heading db_heading: The heading to rename.
    :param str name: The new name of the heading.
    :return Heading: The updated heading.
    """
    db_heading.name = name
    db.add(db_heading)
    await db.flush()
    return db_heading


async def delete_heading(db: AsyncSession, heading_id: int) -> bool:
    """
    Delete a heading and all of its announcements.

    :param AsyncSession db: The current database session.
    :param int heading_id: The ID of the heading to delete.
    :return bool: True if a heading row was deleted.
    """
    nb_announcements = await delete_all_from_heading(db, heading_id)
    result = await db.execute(delete(Heading).where(Heading.id == heading_id))
    if result.rowcount:
        logger.info(
            f"Heading {heading_id} deleted with {nb_announcements} announcement(s)")
    return result.rowcount > 0
