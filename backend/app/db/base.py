"""Declarative base and shared column builders for database models."""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import Column, DateTime, inspect
from sqlalchemy.orm import DeclarativeBase

from app.utils.model_enhancer import standardize_attributes


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all models.

    Instances describe themselves as plain snake_case dicts, which makes them
    ``Serializable`` for the camelCase transformer.
    """

    def to_plain_object(self) -> dict[str, Any]:
        """Column values keyed by column name."""
        return {
            attr.key: getattr(self, attr.key)
            for attr in inspect(self).mapper.column_attrs
        }

    def __repr__(self) -> str:
        identity = inspect(self).identity
        return f"<{type(self).__name__} {identity}>"


def timestamp_columns(options: dict[str, Any]) -> type:
    """Build a mixin holding the timestamp columns named in enhanced model options."""
    attrs: dict[str, Column] = {}

    created_at = options.get("created_at_column")
    if created_at:
        attrs[created_at] = Column(
            DateTime(timezone=True),
            default=utcnow,
            nullable=False,
            comment="Record creation timestamp",
        )

    updated_at = options.get("updated_at_column")
    if updated_at:
        attrs[updated_at] = Column(
            DateTime(timezone=True),
            default=utcnow,
            onupdate=utcnow,
            nullable=False,
            comment="Record last update timestamp",
        )

    # Soft delete
    deleted_at = options.get("deleted_at_column")
    if deleted_at:
        attrs[deleted_at] = Column(
            DateTime(timezone=True),
            nullable=True,
            comment="Soft delete timestamp",
        )

    return type("TimestampMixin", (), standardize_attributes(attrs))
