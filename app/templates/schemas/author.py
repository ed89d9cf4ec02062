"""
This module contains the pydantic models for the authors of the bulletin board.
The models include the contact records, AuthorCreate, AuthorRead, AuthorUpdate
and AuthorLogin models.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.utils import validate_email, validate_name, validate_password

# pylint: disable=R0903


class EmailBase(BaseModel):
    """A contact email of an author."""
    email: str

    model_config = ConfigDict(from_attributes=True)

    @field_validator("email")
    @classmethod
    def _email_validation(cls, value: str) -> str:
        return validate_email(value)


class PhoneBase(BaseModel):
    """A contact phone of an author."""
    phone: str = Field(min_length=3, max_length=32)

    model_config = ConfigDict(from_attributes=True)


class AddressBase(BaseModel):
    """A postal address of an author."""
    country: str = Field(min_length=1, max_length=64)
    city: str = Field(min_length=1, max_length=64)
    street: str | None = None

    model_config = ConfigDict(from_attributes=True)


class AuthorBase(BaseModel):
    """Base model for the authors."""
    name: str = Field(min_length=1, max_length=32)
    first_name: str | None = Field(default=None, max_length=64)
    last_name: str | None = Field(default=None, max_length=64)
    emails: list[EmailBase] = Field(default=[])
    phones: list[PhoneBase] = Field(default=[])
    addresses: list[AddressBase] = Field(default=[])

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        return validate_name(value)


class AuthorCreate(AuthorBase):
    """Model for registering a new author."""
    password: str

    @field_validator("password")
    @classmethod
    def _password_validation(cls, value: str) -> str:
        return validate_password(value)


class AuthorRead(AuthorBase):
    """Model for an author in the API."""
    id: int
    roles: list[str] = Field(default=[], validation_alias="role_names")
    created_at: int
    updated_at: int

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        return value


class AuthorUpdate(BaseModel):
    """Model for updating an existing author. Contact lists replace the existing ones."""
    name: str | None = Field(default=None, min_length=1, max_length=32)
    first_name: str | None = Field(default=None, max_length=64)
    last_name: str | None = Field(default=None, max_length=64)
    password: str | None = None
    emails: list[EmailBase] | None = None
    phones: list[PhoneBase] | None = None
    addresses: list[AddressBase] | None = None

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str | None) -> str | None:
        if value is not None:
            return validate_name(value)
        return value

    @field_validator("password")
    @classmethod
    def _password_validation(cls, value: str | None) -> str | None:
        if value is not None:
            return validate_password(value)
        return value


class AuthorLogin(BaseModel):
    """Credentials of an author."""
    name: str
    password: str
