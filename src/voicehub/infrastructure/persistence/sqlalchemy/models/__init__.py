"""SQLAlchemy models for persistence layer."""

from voicehub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

__all__ = [
    "Base",
    "TimestampMixin",
]
