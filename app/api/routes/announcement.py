"""This module contains the API endpoints related to the announcements."""
from fastapi import APIRouter
from fastapi.exceptions import HTTPException
from fastapi.params import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.db import get_async_db
from app.core.permissions import has_permission
from app.db_objects.author import get_current_author
from app.db_objects.db_models import Author as Author_DB
from app.services import announcement as announcement_service
from app.templates.schemas.announcement import AnnouncementCreate, AnnouncementRead, AnnouncementUpdate

router = APIRouter()


async def _get_announcement_or_404(db: AsyncSession, announcement_id: int) -> AnnouncementRead:
    announcement = await announcement_service.find(db, announcement_id)
    if announcement is None:
        raise HTTPException(status_code=404, detail="Announcement not found")
    return announcement


# ~~~~~ CRUD ~~~~~ #
# ------- Create ------- #


@router.post("/", response_model=AnnouncementRead)
async def new_announcement(
    announcement: AnnouncementCreate,
    db: AsyncSession = Depends(get_async_db),
    current_author: Author_DB = Depends(get_current_author),
):
    """
    Publish a new announcement for the author making the request.
    The authors having a matching suitable ad are notified by email.

    Parameters
    ----------
    announcement : AnnouncementCreate
        The announcement to publish.
    db : AsyncSession
        The current database session.
    current_author : Author_DB
        The author making the request.

    Returns
    -------
    AnnouncementRead
        The published announcement.

    Raises
    ------
    HTTPException
        - 404 Not Found: If the heading does not exist.
    """
    has_permission(current_author, "announcement", "create")
    return await announcement_service.save(db, announcement, current_author.id)


# ------- Read ------- #


@router.get("/", response_model=list[AnnouncementRead])
async def read_announcements(
    page: int = Query(default=0, ge=0),
    size: int = Query(default=settings.PAGE_SIZE_DEFAULT, ge=1, le=settings.PAGE_SIZE_MAX),
    db: AsyncSession = Depends(get_async_db),
):
    """
    Get one page of announcements.

    Parameters
    ----------
    page : int
        The zero-based index of the page.
    size : int
        The maximum number of announcements in the page.

    Returns
    -------
    list[AnnouncementRead]
        The announcements of the page, ordered by ID.
    """
    return await announcement_service.get_page(db, page, size)


# ------- Delete (bulk) ------- #
# NOTE: declared before "/{announcement_id}"


@router.delete("/inactive")
async def purge_inactive_announcements(
    db: AsyncSession = Depends(get_async_db),
    current_author: Author_DB = Depends(get_current_author),
):
    """Delete all the inactive announcements. Only Admins can purge them."""
    has_permission(current_author, "announcement", "purge")
    return {"deleted": await announcement_service.delete_inactive(db)}


@router.delete("/heading/{heading_id}")
async def delete_heading_announcements(
    heading_id: int,
    db: AsyncSession = Depends(get_async_db),
    current_author: Author_DB = Depends(get_current_author),
):
    """Delete all the announcements of a heading, keeping the heading. Only Admins can do it."""
    has_permission(current_author, "announcement", "purge")
    return {"deleted": await announcement_service.delete_by_heading(db, heading_id)}


@router.get("/{announcement_id}", response_model=AnnouncementRead)
async def read_announcement(announcement_id: int, db: AsyncSession = Depends(get_async_db)):
    """Get an announcement by its ID."""
    return await _get_announcement_or_404(db, announcement_id)


# ------- Update ------- #


@router.put("/{announcement_id}", response_model=AnnouncementRead)
async def update_announcement(
    announcement_id: int,
    announcement: AnnouncementUpdate,
    db: AsyncSession = Depends(get_async_db),
    current_author: Author_DB = Depends(get_current_author),
):
    """
    Update an announcement.
    Only Admins or the author of the announcement can update it.
    """
    db_announcement = await _get_announcement_or_404(db, announcement_id)
    has_permission(current_author, "announcement", "update", db_announcement)
    return await announcement_service.update(db, announcement_id, announcement)


# ------- Delete ------- #


@router.delete("/{announcement_id}")
async def delete_announcement(
    announcement_id: int,
    db: AsyncSession = Depends(get_async_db),
    current_author: Author_DB = Depends(get_current_author),
):
    """
    Delete an announcement.
    Only Admins or the author of the announcement can delete it.
    """
    db_announcement = await _get_announcement_or_404(db, announcement_id)
    has_permission(current_author, "announcement", "delete", db_announcement)
    await announcement_service.delete(db, announcement_id)
    return {"message": f"Announcement {announcement_id} deleted"}
