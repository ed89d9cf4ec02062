"""This module contains the API endpoints related to the headings of the announcements."""
from fastapi import APIRouter
from fastapi.exceptions import HTTPException
from fastapi.params import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_async_db
from app.core.permissions import has_permission
from app.db_objects.author import get_current_author
from app.db_objects.db_models import Author as Author_DB
from app.services import heading as heading_service
from app.templates.schemas.heading import HeadingCreate, HeadingRead, HeadingUpdate

router = APIRouter()


@router.get("/", response_model=list[HeadingRead])
async def read_headings(db: AsyncSession = Depends(get_async_db)):
    """List all the headings, ordered by name."""
    return await heading_service.get_all(db)


@router.post("/", response_model=HeadingRead)
async def new_heading(
    heading: HeadingCreate,
    db: AsyncSession = Depends(get_async_db),
    current_author: Author_DB = Depends(get_current_author),
):
    """Create a new heading. Only Admins can create headings."""
    has_permission(current_author, "heading", "create")
    return await heading_service.save(db, heading)


@router.get("/{heading_id}", response_model=HeadingRead)
async def read_heading(heading_id: int, db: AsyncSession = Depends(get_async_db)):
    """Get a heading by its ID."""
    heading = await heading_service.find(db, heading_id)
    if heading is None:
        raise HTTPException(status_code=404, detail="Heading not found")
    return heading


@router.put("/{heading_id}", response_model=HeadingRead)
async def update_heading(
    heading_id: int,
    heading: HeadingUpdate,
    db: AsyncSession = Depends(get_async_db),
    current_author: Author_DB = Depends(get_current_author),
):
    """Rename a heading. Only Admins can update headings."""
    has_permission(current_author, "heading", "update")
    db_heading = await heading_service.update(db, heading_id, heading)
    if db_heading is None:
        raise HTTPException(status_code=404, detail="Heading not found")
    return db_heading


@router.delete("/{heading_id}")
async def delete_heading(
    heading_id: int,
    db: AsyncSession = Depends(get_async_db),
    current_author: Author_DB = Depends(get_current_author),
):
    """
    Delete a heading and all of its announcements.
    Only Admins can delete headings.

    Raises
    ------
    HTTPException
        - 403 Forbidden: If the author is not an Admin.
        - 404 Not Found: If the heading does not exist.
    """
    has_permission(current_author, "heading", "delete")
    if not await heading_service.delete(db, heading_id):
        raise HTTPException(status_code=404, detail="Heading not found")
    return {"message": f"Heading {heading_id} deleted"}
