"""Logging setup shared by the API and the CLI entrypoints."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a stdout handler on the root logger at ``level``."""

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    # SQL echo is controlled by the engine, not by the application level.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


__all__ = ["LOG_FORMAT", "configure_logging"]
