"""This module contains the SQLAlchemy models of the bulletin board."""
import json
from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer, MetaData, String, Table, Text
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from app.core.utils import generate_timestamp

# pylint: disable=R0903


class Base(AsyncAttrs, DeclarativeBase):
    """The base class for all SQLAlchemy models."""
    metadata = MetaData(naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_name)s",
        "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    })


# Many-to-Many Reference Tables
author_roles = Table(
    "author_roles",
    Base.metadata,
    Column("author_id", ForeignKey("authors.id"), primary_key=True),
    Column("role_id", ForeignKey("roles.id"), primary_key=True),
)

# ---- MODELS ----


class Role(Base):
    """Roles model."""
    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(32), unique=True)

    def __repr__(self) -> str:
        return f"Role({self.name})"


class Email(Base):
    """Contact emails of an author."""
    __tablename__ = "emails"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    email: Mapped[str] = mapped_column(String, nullable=False)

    #   Many-to-One
    author_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("authors.id"), nullable=False)
    author: Mapped["Author"] = relationship(back_populates="emails")


class Phone(Base):
    """Contact phones of an author."""
    __tablename__ = "phones"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    phone: Mapped[str] = mapped_column(String(32), nullable=False)

    #   Many-to-One
    author_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("authors.id"), nullable=False)
    author: Mapped["Author"] = relationship(back_populates="phones")


class Address(Base):
    """Postal addresses of an author."""
    __tablename__ = "addresses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    country: Mapped[str] = mapped_column(String(64))
    city: Mapped[str] = mapped_column(String(64))
    street: Mapped[str | None]

    #   Many-to-One
    author_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("authors.id"), nullable=False)
    author: Mapped["Author"] = relationship(back_populates="addresses")


# pylint: disable=E1136


class Author(Base):
    """Authors model."""
    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        unique=True
    )
    first_name: Mapped[str | None] = mapped_column(String(64))
    last_name: Mapped[str | None] = mapped_column(String(64))
    password: Mapped[str] = mapped_column(
        String,
        nullable=False
    )
    created_at: Mapped[int] = mapped_column(
        Integer,
        default=generate_timestamp
    )
    updated_at: Mapped[int] = mapped_column(
        Integer,
        default=generate_timestamp
    )

    # Relationships

    #   One-to-Many
    emails: Mapped[list["Email"]] = relationship(
        back_populates="author",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    phones: Mapped[list["Phone"]] = relationship(
        back_populates="author",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    addresses: Mapped[list["Address"]] = relationship(
        back_populates="author",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    #   Many-to-Many
    roles: Mapped[list["Role"]] = relationship(
        secondary=author_roles,
        lazy="selectin",
    )

    @property
    def role_names(self) -> list[str]:
        """The names of the roles of the author."""
        return [role.name for role in self.roles]

    def __repr__(self) -> str:
        repr_dict = {
            "id": self.id,
            "name": self.name,
            "first_name": self.first_name,
            "last_name": self.last_name,
        }
        return f"Author({json.dumps(repr_dict, indent=4)})"


class Heading(Base):
    """Headings (categories) model."""
    __tablename__ = "headings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(64), unique=True)

    def __repr__(self) -> str:
        return f"Heading({json.dumps({'id': self.id, 'name': self.name}, indent=4)})"


class Announcement(Base):
    """Announcements model."""
    __tablename__ = "announcements"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(128), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    price: Mapped[float | None] = mapped_column(Float)
    active: Mapped[bool] = mapped_column(
        Boolean,
        default=True
    )
    created_at: Mapped[int] = mapped_column(
        Integer,
        default=generate_timestamp
    )

    #   Many-to-One
    author_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("authors.id"), nullable=False)
    author: Mapped["Author"] = relationship(foreign_keys=[author_id])
    heading_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("headings.id"), nullable=False)
    heading: Mapped["Heading"] = relationship(foreign_keys=[heading_id])

    def __repr__(self) -> str:
        repr_dict = {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "active": self.active,
            "author_id": self.author_id,
            "heading_id": self.heading_id,
        }
        return f"Announcement({json.dumps(repr_dict, indent=4)})"


class SuitableAd(Base):
    """Saved searches of an author, matched against new announcements."""
    __tablename__ = "suitable_ads"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    keyword: Mapped[str] = mapped_column(String(64), nullable=False)
    max_price: Mapped[float | None] = mapped_column(Float)
    created_at: Mapped[int] = mapped_column(
        Integer,
        default=generate_timestamp
    )

    #   Many-to-One
    author_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("authors.id"), nullable=False)
    author: Mapped["Author"] = relationship(foreign_keys=[author_id])

    def __repr__(self) -> str:
        repr_dict = {
            "id": self.id,
            "keyword": self.keyword,
            "max_price": self.max_price,
            "author_id": self.author_id,
        }
        return f"SuitableAd({json.dumps(repr_dict, indent=4)})"
