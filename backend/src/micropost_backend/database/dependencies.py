"""FastAPI dependencies for database access."""

from collections.abc import Iterator
from functools import cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from micropost_backend.database.service import DatabaseService
from micropost_backend.settings import BackendSettings, get_settings

SettingsDep = Annotated[BackendSettings, Depends(get_settings)]


@cache
def _build_database_service(database_url: str) -> DatabaseService:
    return DatabaseService(database_url)


def get_database(settings: SettingsDep) -> DatabaseService:
    """Return the database service for the configured URL, built once per URL."""
    return _build_database_service(settings.database_url)


DatabaseDep = Annotated[DatabaseService, Depends(get_database)]


def get_session(db: DatabaseDep) -> Iterator[Session]:
    """Yield one request-scoped session, committed when the endpoint succeeds."""
    with db.session() as session:
        yield session


SessionDep = Annotated[Session, Depends(get_session)]
