"""This module contains the business logic of the suitable ads."""
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import transactional
from app.db_objects.db_models import SuitableAd
from app.db_objects.suitable_ad import (
    create_suitable_ad, delete_suitable_ad, get_author_suitable_ads, get_suitable_ad
)
from app.templates.schemas.suitable_ad import SuitableAdCreate, SuitableAdRead


@transactional
async def save(db: AsyncSession, suitable_ad: SuitableAdCreate, author_id: int) -> SuitableAdRead:
    """Save a new suitable ad for an author."""
    db_suitable_ad = await create_suitable_ad(
        db, SuitableAd(**suitable_ad.model_dump(), author_id=author_id))
    return SuitableAdRead.model_validate(db_suitable_ad)


async def find(db: AsyncSession, suitable_ad_id: int) -> SuitableAdRead | None:
    """Find a suitable ad by its ID, None if it does not exist."""
    db_suitable_ad = await get_suitable_ad(db, suitable_ad_id)
    if db_suitable_ad is None:
        return None
    return SuitableAdRead.model_validate(db_suitable_ad)


async def get_for_author(db: AsyncSession, author_id: int) -> list[SuitableAdRead]:
    """Get the suitable ads of an author."""
    return [
        SuitableAdRead.model_validate(db_suitable_ad)
        for db_suitable_ad in await get_author_suitable_ads(db, author_id)
    ]


@transactional
async def delete(db: AsyncSession, suitable_ad_id: int) -> bool:
    """Delete a suitable ad, returns True if it existed."""
    return await delete_suitable_ad(db, suitable_ad_id)
