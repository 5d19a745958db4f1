"""API layer: application factory, routers, payload models and services."""

from micropost_backend.api.app import RouteEntry, create_api, route_table

__all__ = ["RouteEntry", "create_api", "route_table"]
