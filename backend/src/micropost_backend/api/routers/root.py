"""Root path, served by the users index action."""

from __future__ import annotations

from fastapi import APIRouter

from micropost_backend.api.models import UserResponse
from micropost_backend.api.routers.users import list_users

router = APIRouter(tags=["users"])
router.add_api_route(
    "/",
    list_users,
    methods=["GET"],
    response_model=list[UserResponse],
    name="root",
)
