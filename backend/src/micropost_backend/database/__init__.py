"""Database connectivity helpers, schemas and repositories."""

from micropost_backend.database.base import BaseSchema
from micropost_backend.database.dependencies import (
    SessionDep,
    get_database,
    get_session,
)
from micropost_backend.database.repositories import (
    MicropostRepository,
    UserRepository,
)
from micropost_backend.database.schemas import MicropostSchema, UserSchema
from micropost_backend.database.service import DatabaseService
from micropost_backend.settings import BackendSettings, get_settings, settings

__all__ = [
    "BackendSettings",
    "BaseSchema",
    "DatabaseService",
    "MicropostRepository",
    "MicropostSchema",
    "SessionDep",
    "UserRepository",
    "UserSchema",
    "get_database",
    "get_session",
    "get_settings",
    "settings",
]
