"""Repositories wrapping SQLAlchemy sessions per entity."""

from micropost_backend.database.repositories.micropost import MicropostRepository
from micropost_backend.database.repositories.user import UserRepository

__all__ = ["MicropostRepository", "UserRepository"]
