"""Models used for API request and response payloads."""

from micropost_backend.api.models.micropost import (
    MicropostCreateRequest,
    MicropostResponse,
    MicropostUpdateRequest,
)
from micropost_backend.api.models.user import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "MicropostCreateRequest",
    "MicropostResponse",
    "MicropostUpdateRequest",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
