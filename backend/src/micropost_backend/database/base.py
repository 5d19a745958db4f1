"""Declarative base for SQLAlchemy models."""

from datetime import UTC, datetime

from sqlalchemy.orm import DeclarativeBase


def utcnow() -> datetime:
    """Timestamp default with sub-second precision on every backend."""
    return datetime.now(UTC)


class BaseSchema(DeclarativeBase):
    """Base class for all SQLAlchemy schemas."""

    pass
