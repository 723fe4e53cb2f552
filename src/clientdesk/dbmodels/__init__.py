"""
Database models for clientdesk (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
Alembic autogenerate diffs, and exposes `target_metadata` for Alembic.

``projects.client_id`` is deliberately a plain indexed column: the link to
``clients`` is maintained by the resolvers, not by a foreign key.
"""

import re
from uuid import uuid4

from sqlalchemy import Index, MetaData, PrimaryKeyConstraint, String, UniqueConstraint, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, validates

from ..store.base import DocumentValidationError

# Naming convention for deterministic constraint/index names in Alembic diffs
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Zimbabwean mobile numbers: optional +263 or trunk 0 prefix, then 7 and eight digits
PHONE_PATTERN = re.compile(r"^(\+263|0)?7[0-9]{8}$")


def new_document_id() -> str:
    return uuid4().hex


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Clients(Base):
    __tablename__ = "clients"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="clients_pkey"),
        UniqueConstraint("email", name="clients_email_key"),
    )

    id: Mapped[str] = mapped_column(String(32), default=new_document_id)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(20), nullable=False)

    @validates("name")
    def validate_name(self, key: str, value: str) -> str:
        value = (value or "").strip()
        if not 2 <= len(value) <= 100:
            raise DocumentValidationError(
                key, f"Client name must be between 2 and 100 characters, got {len(value)}"
            )
        return value

    @validates("email")
    def validate_email(self, key: str, value: str) -> str:
        value = (value or "").strip()
        if not value:
            raise DocumentValidationError(key, "Client email is required")
        return value

    @validates("phone")
    def validate_phone(self, key: str, value: str) -> str:
        value = (value or "").strip()
        if not PHONE_PATTERN.match(value):
            raise DocumentValidationError(key, f"{value} is not a valid Zimbabwean phone number!")
        return value

    def __repr__(self) -> str:
        return f"<Clients id={self.id} email={self.email}>"


class Projects(Base):
    __tablename__ = "projects"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="projects_pkey"),
        Index("idx_projects_client_id", "client_id"),
    )

    id: Mapped[str] = mapped_column(String(32), default=new_document_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500))
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="Not Started", server_default=text("'Not Started'")
    )
    client_id: Mapped[str] = mapped_column(String(32), nullable=False)

    def __repr__(self) -> str:
        return f"<Projects id={self.id} client_id={self.client_id} status={self.status}>"


target_metadata = Base.metadata

__all__ = ["Base", "Clients", "PHONE_PATTERN", "Projects", "new_document_id", "target_metadata"]
