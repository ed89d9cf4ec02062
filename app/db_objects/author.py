"""
This module contains the functions to interact with the authors table in the database.

It provides functions to save, find, update and delete authors, the bespoke
delete-by-author statements used by the cascade delete, and the helpers for the
roles of the authors.
"""
from typing import Any
from fastapi import Depends, HTTPException
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import logger
from app.core.db import get_async_db
from app.core.security import decode_access_token, oauth2_scheme
from app.core.utils import generate_timestamp
from app.db_objects.db_models import (
    Address, Announcement, Author, Email, Phone, Role, SuitableAd, author_roles
)


# ~~~~~ CRUD ~~~~~ #


# ------- Create ------- #


async def save_author(db: AsyncSession, db_author: Author) -> Author:
    """
    Store a new author, with its contact records.

    The contact records are linked to the author through the `author`
    back-reference of their relationship, so they are inserted with it.

    :param AsyncSession db: The current database session.
    :param Author db_author: The author to store.
    :return Author: The stored author, with its generated ID.
    """
    db.add(db_author)
    await db.flush()
    logger.debug(f"Author {db_author.name} saved with ID {db_author.id}")
    return db_author


# ------- Read ------- #


async def find_author(db: AsyncSession, author_id: int) -> Author | None:
    """
    Retrieve an author by its ID.

    :param AsyncSession db: The current database session.
    :param int author_id: The ID of the author.
    :return Author | None: The author if found, else None.
    """
    return await db.get(Author, author_id)


async def get_author_by_name(db: AsyncSession, name: str) -> Author | None:
    """
    Retrieve an author by its name.

    :param AsyncSession db: The current database session.
    :param str name: The name of the author.
    :return Author | None: The author if found, else None.
    """
    result = await db.execute(select(Author).where(Author.name == name))
    return result.scalars().first()


async def get_authors(db: AsyncSession) -> list[Author]:
    """
    Get all the authors.

    :param AsyncSession db: The current database session.
    :return list[Author]: The authors, ordered by ID.
    """
    result = await db.execute(select(Author).order_by(Author.id))
    return list(result.scalars().all())


async def get_nb_authors(db: AsyncSession) -> int:
    """
    Get the number of authors.

    :param AsyncSession db: The current database session.
    :return int: The number of authors.
    """
    result = await db.execute(select(func.count()).select_from(Author))
    return int(result.scalar_one())


# ------- Update ------- #


async def update_author(db: AsyncSession, db_author: Author, author_data: dict[str, Any]) -> Author:
    """
    Merge new values into an existing author.

    The contact lists, when present in `author_data`, replace the existing ones
    (the removed contact records are deleted as orphans).

    :param AsyncSession db: The current database session.
    :param Author db_author: The author to update.
    :param dict author_data: The attributes to set on the author.
    :return Author: The updated author.
    """
    for key, value in author_data.items():
        setattr(db_author, key, value)
    db_author.updated_at = generate_timestamp()
    db.add(db_author)
    await db.flush()
    return db_author


# ------- Delete ------- #


async def delete_author(db: AsyncSession, author_id: int) -> bool:
    """
    Delete an author and everything depending on it.

    The announcements and the suitable ads of the author are deleted first,
    then its contact records and finally the author row.

    :param AsyncSession db: The current database session.
    :param int author_id: The ID of the author to delete.
    :return bool: True if an author row was deleted.
    """
    await delete_announcements_by_author_id(db, author_id)
    await delete_all_suitable_ads_by_author_id(db, author_id)
    for contact_model in (Email, Phone, Address):
        await db.execute(delete(contact_model).where(contact_model.author_id == author_id))
    result = await db.execute(delete(Author).where(Author.id == author_id))
    return result.rowcount > 0


async def delete_announcements_by_author_id(db: AsyncSession, author_id: int) -> int:
    """
    Delete all the announcements of an author.

    :param AsyncSession db: The current database session.
    :param int author_id: The ID of the author.
    :return int: The number of deleted announcements.
    """
    result = await db.execute(
        delete(Announcement).where(Announcement.author_id == author_id)
    )
    return result.rowcount


async def delete_all_suitable_ads_by_author_id(db: AsyncSession, author_id: int) -> int:
    """
    Delete all the suitable ads of an author.

    :param AsyncSession db: The current database session.
    :param int author_id: The ID of the author.
    :return int: The number of deleted suitable ads.
    """
    result = await db.execute(
        delete(SuitableAd).where(SuitableAd.author_id == author_id)
    )
    return result.rowcount


async def delete_from_author_role(db: AsyncSession, author_id: int) -> None:
    """
    Remove the links between an author and its roles.

    :param AsyncSession db: The current database session.
    :param int author_id: The ID of the author.
    """
    await db.execute(
        delete(author_roles).where(author_roles.c.author_id == author_id)
    )


# ----- Roles ----- #


async def get_role(db: AsyncSession, name: str, create: bool = True) -> Role | None:
    """
    Get a role by its name, creating it when missing.

    :param AsyncSession db: The current database session.
    :param str name: The name of the role.
    :param bool create: Whether to create the role if it does not exist.
    :return Role | None: The role, None if it does not exist and `create` is False.
    """
    result = await db.execute(select(Role).where(Role.name == name))
    db_role = result.scalars().first()
    if db_role is None and create:
        db_role = Role(name=name)
        db.add(db_role)
        await db.flush()
        logger.info(f"Role '{name}' created")
    return db_role


# ----- Helper Functions ----- #

async def get_current_author(
    token: str = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_async_db)
) -> Author:
    """
    Get the author making the request from its bearer token.

    :param str token: The token from the request header.
    :param AsyncSession db: The current database session.
    :return Author: The author the token was issued to.
    :raises HTTPException: 401 if the token is invalid or its author no longer exists.
    """
    token_data = decode_access_token(token)
    db_author = await get_author_by_name(db, token_data.name)
    if db_author is None:
        raise HTTPException(
            status_code=401,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return db_author
