"""This module contains the business logic of the authors (registration, login, CRUD)."""
from fastapi.exceptions import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import logger, settings
from app.core.db import sessionmanager, transactional
from app.core.security import Token, generate_token, hash_password, verify_password
from app.db_objects.author import (
    delete_announcements_by_author_id as _delete_announcements_by_author_id,
    delete_author, delete_from_author_role, find_author, get_author_by_name,
    get_authors, get_nb_authors, get_role, save_author, update_author,
)
from app.db_objects.db_models import Address, Author, Email, Phone
from app.templates.schemas.author import AuthorCreate, AuthorLogin, AuthorRead, AuthorUpdate


def _map_contacts(author: AuthorCreate | AuthorUpdate) -> dict[str, list]:
    contacts = {}
    if author.emails is not None:
        contacts["emails"] = [Email(**email.model_dump()) for email in author.emails]
    if author.phones is not None:
        contacts["phones"] = [Phone(**phone.model_dump()) for phone in author.phones]
    if author.addresses is not None:
        contacts["addresses"] = [Address(**address.model_dump()) for address in author.addresses]
    return contacts


@transactional
async def save(db: AsyncSession, author: AuthorCreate) -> AuthorRead:
    """
    Register a new author with the default role.

    :param AsyncSession db: The current database session.
    :param AuthorCreate author: The author to register.
    :return AuthorRead: The registered author.
    """
    db_author = Author(
        **author.model_dump(exclude={"password", "emails", "phones", "addresses"}),
        **_map_contacts(author),
        roles=[await get_role(db, settings.DEFAULT_ROLE)],
    )
    db_author.password = hash_password(author.password)
    await save_author(db, db_author)
    return AuthorRead.model_validate(db_author)


async def authentication(db: AsyncSession, credentials: AuthorLogin) -> Token:
    """
    Check the credentials of an author and issue its login token.

    :param AsyncSession db: The current database session.
    :param AuthorLogin credentials: The name and password of the author.
    :return Token: The login token.
    :raises HTTPException: 401 if the name or the password is wrong.
    """
    db_author = await get_author_by_name(db, credentials.name)
    if db_author is None or not verify_password(credentials.password, db_author.password):
        raise HTTPException(
            status_code=401,
            detail="Incorrect name or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return generate_token(db_author.name)


async def find(db: AsyncSession, author_id: int) -> AuthorRead | None:
    """
    Find an author by its ID.

    :param AsyncSession db: The current database session.
    :param int author_id: The ID of the author.
    :return AuthorRead | None: The author, None if it does not exist.
    """
    db_author = await find_author(db, author_id)
    if db_author is None:
        return None
    return AuthorRead.model_validate(db_author)


async def get_all(db: AsyncSession) -> list[AuthorRead]:
    """Get all the authors."""
    return [AuthorRead.model_validate(db_author) for db_author in await get_authors(db)]


@transactional
async def update(db: AsyncSession, author_id: int, author: AuthorUpdate) -> AuthorRead | None:
    """
    Update an author. A new password is hashed before being stored.

    :param AsyncSession db: The current database session.
    :param int author_id: The ID of the author.
    :param AuthorUpdate author: The new data of the author.
    :return AuthorRead | None: The updated author, None if it does not exist.
    """
    db_author = await find_author(db, author_id)
    if db_author is None:
        return None
    author_data = author.model_dump(
        exclude_unset=True,
        exclude_none=True,
        exclude={"password", "emails", "phones", "addresses"}
    )
    author_data.update(_map_contacts(author))
    if author.password:
        author_data["password"] = hash_password(author.password)
    await update_author(db, db_author, author_data)
    return AuthorRead.model_validate(db_author)


@transactional
async def delete(db: AsyncSession, author_id: int) -> bool:
    """
    Delete an author, its roles links, announcements, suitable ads and contacts.

    :param AsyncSession db: The current database session.
    :param int author_id: The ID of the author.
    :return bool: True if the author existed.
    """
    await delete_from_author_role(db, author_id)
    return await delete_author(db, author_id)


@transactional
async def delete_announcements_by_author_id(db: AsyncSession, author_id: int) -> int:
    """
    Delete all the announcements of an author.

    :param AsyncSession db: The current database session.
    :param int author_id: The ID of the author.
    :return int: The number of deleted announcements.
    """
    return await _delete_announcements_by_author_id(db, author_id)


async def init_default_author() -> None:
    """
    Initialize the roles and the default admin author.

    If there are no authors in the database, an author named after
    DEFAULT_ADMIN_NAME is created with the 'admin' and default roles.
    A warning is logged asking to change its password after first login.
    """
    try:
        async with sessionmanager.session() as db:
            default_role = await get_role(db, settings.DEFAULT_ROLE)
            admin_role = await get_role(db, "admin")
            if await get_nb_authors(db) == 0:
                default_author = Author(
                    name=settings.DEFAULT_ADMIN_NAME,
                    password=hash_password(settings.DEFAULT_ADMIN_PASSWORD),
                    roles=[admin_role, default_role],
                )
                await save_author(db, default_author)
                logger.success(
                    "\nDefault author created:\n\n"
                    f"    Name: {default_author.name}\n"
                    f"    Roles: {default_author.role_names}\n\n"
                    "Please change the default password after first login.\n",
                )
            await db.commit()
    except IntegrityError as e:
        logger.error(f"Failed to create default author: {e.orig}")
