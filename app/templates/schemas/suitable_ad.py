"""This module contains the pydantic models for the suitable ads (saved searches) of the authors."""
from pydantic import BaseModel, ConfigDict, Field

# pylint: disable=R0903


class SuitableAdBase(BaseModel):
    """Base model for the suitable ads."""
    keyword: str = Field(min_length=1, max_length=64)
    max_price: float | None = Field(default=None, ge=0)


class SuitableAdCreate(SuitableAdBase):
    """Model for creating a new suitable ad. The author is the one making the request."""


class SuitableAdRead(SuitableAdBase):
    """Model for a suitable ad in the API."""
    id: int
    author_id: int
    created_at: int

    model_config = ConfigDict(from_attributes=True)
