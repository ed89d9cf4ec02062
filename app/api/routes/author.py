"""This module contains the API endpoints related to the authors (e.g. register, read, update, delete)."""
from fastapi import APIRouter
from fastapi.exceptions import HTTPException
from fastapi.params import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_async_db
from app.core.permissions import has_permission
from app.db_objects.author import get_current_author
from app.db_objects.db_models import Author as Author_DB
from app.services import author as author_service
from app.templates.schemas.author import AuthorCreate, AuthorRead, AuthorUpdate

router = APIRouter()


async def _get_author_or_404(db: AsyncSession, author_id: int) -> AuthorRead:
    author = await author_service.find(db, author_id)
    if author is None:
        raise HTTPException(status_code=404, detail="Author not found")
    return author


# ~~~~~ CRUD ~~~~~ #
# ------- Create ------- #


@router.post("/", response_model=AuthorRead)
async def new_author(author: AuthorCreate, db: AsyncSession = Depends(get_async_db)):
    """
    Register a new author.
    The author gets the default role and can login right away.

    Parameters
    ----------
    author : AuthorCreate
        The author to register, with its contacts.
    db : AsyncSession
        The current database session.

    Returns
    -------
    AuthorRead
        The registered author.
    """
    return await author_service.save(db, author)


# ------- Read ------- #


@router.get("/", response_model=list[AuthorRead])
async def read_authors(
    db: AsyncSession = Depends(get_async_db),
    current_author: Author_DB = Depends(get_current_author),  # pylint: disable=unused-argument
):
    """List all the authors. Only logged in authors can list them."""
    return await author_service.get_all(db)


@router.get("/{author_id}", response_model=AuthorRead)
async def read_author(author_id: int, db: AsyncSession = Depends(get_async_db)):
    """
    Get an author by its ID.

    Raises
    ------
    HTTPException
        - 404 Not Found: If the author does not exist.
    """
    return await _get_author_or_404(db, author_id)


# ------- Update ------- #


@router.put("/{author_id}", response_model=AuthorRead)
async def update_author(
    author_id: int,
    author: AuthorUpdate,
    db: AsyncSession = Depends(get_async_db),
    current_author: Author_DB = Depends(get_current_author),
):
    """
    Update an author.
    Only Admins or the author itself can update an author.
    The login tokens are issued to the name of the author: after a rename,
    the tokens already issued are refused and the author has to login again.

    Parameters
    ----------
    author_id : int
        The ID of the author to update.
    author : AuthorUpdate
        The new data of the author. The given contact lists replace the existing ones.
    db : AsyncSession
        The current database session.
    current_author : Author_DB
        The author making the request.

    Returns
    -------
    AuthorRead
        The updated author.
    """
    db_author = await _get_author_or_404(db, author_id)
    has_permission(current_author, "author", "update", db_author)
    return await author_service.update(db, author_id, author)


# ------- Delete ------- #


@router.delete("/{author_id}")
async def delete_author(
    author_id: int,
    db: AsyncSession = Depends(get_async_db),
    current_author: Author_DB = Depends(get_current_author),
):
    """
    Delete an author with its announcements, suitable ads and contacts.
    Only Admins or the author itself can delete an author.
    """
    db_author = await _get_author_or_404(db, author_id)
    has_permission(current_author, "author", "delete", db_author)
    await author_service.delete(db, author_id)
    return {"message": f"Author {db_author.name} deleted"}


@router.delete("/{author_id}/announcements")
async def delete_author_announcements(
    author_id: int,
    db: AsyncSession = Depends(get_async_db),
    current_author: Author_DB = Depends(get_current_author),
):
    """
    Delete all the announcements of an author.
    Only Admins or the author itself can delete them.

    Returns
    -------
    dict
        The number of deleted announcements.
    """
    db_author = await _get_author_or_404(db, author_id)
    has_permission(current_author, "author", "update", db_author)
    deleted = await author_service.delete_announcements_by_author_id(db, author_id)
    return {"deleted": deleted}
