"""
This module contains the pydantic models for the announcements of the bulletin board.
The models include the AnnouncementCreate, AnnouncementRead and AnnouncementUpdate models.
"""
from pydantic import BaseModel, ConfigDict, Field

# pylint: disable=R0903


class AnnouncementBase(BaseModel):
    """Base model for the announcements."""
    title: str = Field(min_length=1, max_length=128)
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    heading_id: int


class AnnouncementCreate(AnnouncementBase):
    """Model for creating a new announcement. The author is the one making the request."""
    active: bool = Field(default=True)


class AnnouncementRead(AnnouncementBase):
    """Model for an announcement in the API."""
    id: int
    active: bool
    author_id: int
    created_at: int

    model_config = ConfigDict(from_attributes=True)


class AnnouncementUpdate(BaseModel):
    """Model for updating an existing announcement."""
    title: str | None = Field(default=None, min_length=1, max_length=128)
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    active: bool | None = None
    heading_id: int | None = None
