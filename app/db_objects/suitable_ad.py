"""
This module contains the functions to interact with the suitable ads table in the database.

A suitable ad is a saved search of an author. When a new announcement is saved,
the contact emails of the authors whose suitable ads match it are looked up here
and notified.
"""
from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import logger
from app.core.email import send_announcement_email
from app.db_objects.db_models import Announcement, Email, SuitableAd


# ------- Create ------- #


async def create_suitable_ad(db: AsyncSession, db_suitable_ad: SuitableAd) -> SuitableAd:
    """
    Store a new suitable ad.

    :param AsyncSession db: The current database session.
    :param SuitableAd db_suitable_ad: The suitable ad to store.
    :return SuitableAd: The stored suitable ad, with its generated ID.
    """
    db.add(db_suitable_ad)
    await db.flush()
    return db_suitable_ad


# ------- Read ------- #


async def get_suitable_ad(db: AsyncSession, suitable_ad_id: int) -> SuitableAd | None:
    """
    Retrieve a suitable ad by its ID.

    :param AsyncSession db: The current database session.
    :param int suitable_ad_id: The ID of the suitable ad.
    :return SuitableAd | None: The suitable ad if found, else None.
    """
    return await db.get(SuitableAd, suitable_ad_id)


async def get_author_suitable_ads(db: AsyncSession, author_id: int) -> list[SuitableAd]:
    """
    Get the suitable ads of an author.

    :param AsyncSession db: The current database session.
    :param int author_id: The ID of the author.
    :return list[SuitableAd]: The suitable ads of the author, ordered by ID.
    """
    result = await db.execute(
        select(SuitableAd)
        .where(SuitableAd.author_id == author_id)
        .order_by(SuitableAd.id)
    )
    return list(result.scalars().all())


async def get_matching_emails(db: AsyncSession, announcement: Announcement) -> list[str]:
    """
    Get the contact emails of the authors having a suitable ad matching an announcement.

    A suitable ad matches when its keyword is contained, case-insensitively, in
    the title or the description of the announcement, and its maximum price is
    either unset or not below the price of the announcement. The author of the
    announcement is never notified of its own announcement.

    The price and author filters run in the database. The keyword is compared
    as literal text with `str.casefold`, so SQL wildcards in a keyword are not
    interpreted and non-ASCII letters are folded too.

    :param AsyncSession db: The current database session.
    :param Announcement announcement: The announcement to match.
    :return list[str]: The distinct matching emails, sorted.
    """
    haystack = f"{announcement.title} {announcement.description or ''}".casefold()
    conditions = [SuitableAd.author_id != announcement.author_id]
    if announcement.price is not None:
        conditions.append(or_(
            SuitableAd.max_price.is_(None),
            SuitableAd.max_price >= announcement.price,
        ))
    result = await db.execute(
        select(Email.email, SuitableAd.keyword)
        .join(SuitableAd, SuitableAd.author_id == Email.author_id)
        .where(*conditions)
    )
    return sorted({email for email, keyword in result.all() if keyword.casefold() in haystack})


# ------- Delete ------- #


async def delete_suitable_ad(db: AsyncSession, suitable_ad_id: int) -> bool:
    """
    Delete a suitable ad by its ID.

    :param AsyncSession db: The current database session.
    :param int suitable_ad_id: The ID of the suitable ad.
    :return bool: True if a row was deleted.
    """
    result = await db.execute(
        delete(SuitableAd).where(SuitableAd.id == suitable_ad_id)
    )
    return result.rowcount > 0


# ----- Notifications ----- #


async def search_emails_for_sending_email(db: AsyncSession, announcement: Announcement) -> list[str]:
    """
    Notify by email the authors whose suitable ads match a new announcement.

    :param AsyncSession db: The current database session.
    :param Announcement announcement: The newly saved announcement.
    :return list[str]: The emails the notification was addressed to.
    """
    emails = await get_matching_emails(db, announcement)
    if not emails:
        logger.debug(f"No suitable ad matches the announcement {announcement.id}")
        return emails
    await send_announcement_email(emails, announcement)
    return emails
