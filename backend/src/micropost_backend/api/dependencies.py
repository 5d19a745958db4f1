"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from micropost_backend.api.services import MicropostService, UserService

_user_service = UserService()
_micropost_service = MicropostService()


def get_user_service() -> UserService:
    """Return the shared :class:`UserService` instance."""

    return _user_service


def get_micropost_service() -> MicropostService:
    """Return the shared :class:`MicropostService` instance."""

    return _micropost_service


__all__ = ["get_micropost_service", "get_user_service"]
