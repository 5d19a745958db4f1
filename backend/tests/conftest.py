"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from micropost_backend.api import create_api
from micropost_backend.database import BaseSchema, DatabaseService, get_database
from micropost_backend.settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator

    from fastapi import FastAPI


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("DATABASE_URL", "sqlite+pysqlite:///:memory:")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def database() -> Iterator[DatabaseService]:
    """In-memory SQLite database shared by every connection of one test."""
    db = DatabaseService(
        "sqlite+pysqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    BaseSchema.metadata.create_all(db.engine)
    yield db
    BaseSchema.metadata.drop_all(db.engine)
    db.engine.dispose()


@pytest.fixture
def app(database: DatabaseService) -> Iterator[FastAPI]:
    application = create_api()
    application.dependency_overrides[get_database] = lambda: database
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_user(client: TestClient):
    """Create a user through the API and return its JSON representation."""

    counter = 0

    def _make_user(name: str = "Example User", email: str | None = None) -> dict:
        nonlocal counter
        counter += 1
        payload = {"name": name, "email": email or f"user{counter}@example.com"}
        response = client.post("/users", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make_user
