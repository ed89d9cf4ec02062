"""This module contains the business logic of the headings."""
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import transactional
from app.db_objects.db_models import Heading
from app.db_objects.heading import create_heading, delete_heading, get_heading, get_headings, update_heading
from app.templates.schemas.heading import HeadingCreate, HeadingRead, HeadingUpdate


@transactional
async def save(db: AsyncSession, heading: HeadingCreate) -> HeadingRead:
    """Create a new heading."""
    db_heading = await create_heading(db, Heading(**heading.model_dump()))
    return HeadingRead.model_validate(db_heading)


async def find(db: AsyncSession, heading_id: int) -> HeadingRead | None:
    """Find a heading by its ID, None if it does not exist."""
    db_heading = await get_heading(db, heading_id)
    if db_heading is None:
        return None
    return HeadingRead.model_validate(db_heading)


async def get_all(db: AsyncSession) -> list[HeadingRead]:
    """Get all the headings."""
    return [HeadingRead.model_validate(db_heading) for db_heading in await get_headings(db)]


@transactional
async def update(db: AsyncSession, heading_id: int, heading: HeadingUpdate) -> HeadingRead | None:
    """Rename a heading, None if it does not exist."""
    db_heading = await get_heading(db, heading_id)
    if db_heading is None:
        return None
    await update_heading(db, db_heading, heading.name)
    return HeadingRead.model_validate(db_heading)


@transactional
async def delete(db: AsyncSession, heading_id: int) -> bool:
    """
    Delete a heading and all of its announcements.

    :param AsyncSession db: The current database session.
    :param int heading_id: The ID of the heading.
    :return bool: True if the heading existed.
    """
    return await delete_heading(db, heading_id)
