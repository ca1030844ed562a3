"""Base model class for SQLAlchemy ORM."""

from __future__ import annotations

from datetime import date
from typing import Any

from sqlalchemy import Date
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    type_annotation_map = {
        date: Date(),
    }

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary keyed by attribute name."""
        mapper = self.__mapper__
        return {attr.key: getattr(self, attr.key) for attr in mapper.column_attrs}
