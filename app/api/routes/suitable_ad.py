"""This module contains the API endpoints related to the suitable ads (saved searches) of the authors."""
from fastapi import APIRouter
from fastapi.exceptions import HTTPException
from fastapi.params import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_async_db
from app.core.permissions import has_permission
from app.db_objects.author import get_current_author
from app.db_objects.db_models import Author as Author_DB
from app.services import suitable_ad as suitable_ad_service
from app.templates.schemas.suitable_ad import SuitableAdCreate, SuitableAdRead

router = APIRouter()


@router.post("/", response_model=SuitableAdRead)
async def new_suitable_ad(
    suitable_ad: SuitableAdCreate,
    db: AsyncSession = Depends(get_async_db),
    current_author: Author_DB = Depends(get_current_author),
):
    """
    Save a suitable ad for the author making the request.
    The author is notified by email of the new announcements matching it.
    """
    has_permission(current_author, "suitable_ad", "create")
    return await suitable_ad_service.save(db, suitable_ad, current_author.id)


@router.get("/", response_model=list[SuitableAdRead])
async def read_own_suitable_ads(
    db: AsyncSession = Depends(get_async_db),
    current_author: Author_DB = Depends(get_current_author),
):
    """List the suitable ads of the author making the request."""
    return await suitable_ad_service.get_for_author(db, current_author.id)


@router.delete("/{suitable_ad_id}")
async def delete_suitable_ad(
    suitable_ad_id: int,
    db: AsyncSession = Depends(get_async_db),
    current_author: Author_DB = Depends(get_current_author),
):
    """
    Delete a suitable ad.
    Only Admins or the owner of the suitable ad can delete it.

    Raises
    ------
    HTTPException
        - 403 Forbidden: If the author is neither an Admin nor the owner.
        - 404 Not Found: If the suitable ad does not exist.
    """
    suitable_ad = await suitable_ad_service.find(db, suitable_ad_id)
    if suitable_ad is None:
        raise HTTPException(status_code=404, detail="Suitable ad not found")
    has_permission(current_author, "suitable_ad", "delete", suitable_ad)
    await suitable_ad_service.delete(db, suitable_ad_id)
    return {"message": f"Suitable ad {suitable_ad_id} deleted"}
