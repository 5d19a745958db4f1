"""Route definitions for public HTTP endpoints."""

from micropost_backend.api.routers.microposts import router as microposts_router
from micropost_backend.api.routers.root import router as root_router
from micropost_backend.api.routers.users import router as users_router

# Registration order is matching order.
ROUTERS = (microposts_router, users_router, root_router)

__all__ = ["ROUTERS", "microposts_router", "root_router", "users_router"]
