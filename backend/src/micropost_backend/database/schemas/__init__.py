"""SQLAlchemy schemas for persisted entities."""

from micropost_backend.database.schemas.micropost import (
    MICROPOST_CONTENT_MAX_LENGTH,
    MicropostSchema,
)
from micropost_backend.database.schemas.user import UserSchema

__all__ = ["MICROPOST_CONTENT_MAX_LENGTH", "MicropostSchema", "UserSchema"]
