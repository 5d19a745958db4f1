"""Micropost backend package wiring and entrypoints."""

from micropost_backend.main import print_routes, run_dev, run_prod
from micropost_backend.settings import BackendSettings, get_settings, settings

main = run_dev

__all__ = [
    "BackendSettings",
    "get_settings",
    "main",
    "print_routes",
    "run_dev",
    "run_prod",
    "settings",
]
