"""This module contains the pydantic models for the headings (categories) of the announcements."""
from pydantic import BaseModel, ConfigDict, Field

# pylint: disable=R0903


class HeadingBase(BaseModel):
    """Base model for the headings."""
    name: str = Field(min_length=1, max_length=64)


class HeadingCreate(HeadingBase):
    """Model for creating a new heading."""


class HeadingRead(HeadingBase):
    """Model for a heading in the API."""
    id: int

    model_config = ConfigDict(from_attributes=True)


class HeadingUpdate(HeadingBase):
    """Model for renaming a heading."""
