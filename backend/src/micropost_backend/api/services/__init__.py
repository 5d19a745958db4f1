"""Service layer for API-specific business logic."""

from micropost_backend.api.services.microposts import (
    MicropostNotFoundError,
    MicropostService,
    UnknownAuthorError,
)
from micropost_backend.api.services.users import (
    EmailAlreadyTakenError,
    UserNotFoundError,
    UserService,
)

__all__ = [
    "EmailAlreadyTakenError",
    "MicropostNotFoundError",
    "MicropostService",
    "UnknownAuthorError",
    "UserNotFoundError",
    "UserService",
]
