"""Factory for constructing the FastAPI application."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from micropost_backend.api.routers import ROUTERS
from micropost_backend.logs import configure_logging
from micropost_backend.settings import get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """One verb/path pair of the application's route table."""

    method: str
    path: str
    action: str


def create_api() -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    config = get_settings()
    configure_logging(config.log_level)

    app = FastAPI(title="Micropost API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    for router in ROUTERS:
        app.include_router(router)
    app.state.routers = ROUTERS
    logger.debug("Registered %d API routes", len(route_table(app)))
    return app


def route_table(app: FastAPI) -> list[RouteEntry]:
    """Return the API routes in matching order, one entry per HTTP verb.

    The table is read from the included routers rather than ``app.routes``:
    newer FastAPI releases keep included routers behind a wrapper there.
    Router paths already carry the router prefix.
    """

    entries: list[RouteEntry] = []
    for router in app.state.routers:
        for route in router.routes:
            if not isinstance(route, APIRoute):
                continue
            for method in sorted(route.methods):
                entries.append(
                    RouteEntry(method=method, path=route.path, action=route.name)
                )
    return entries


__all__ = ["RouteEntry", "create_api", "route_table"]
