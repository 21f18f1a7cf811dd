"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import select
from sqlalchemy.pool import StaticPool

from annotator_backend.api import create_api
from annotator_backend.api.services import load_catalog
from annotator_backend.database import (
    AttributeSchema,
    BaseSchema,
    DatabaseService,
    ItemSchema,
    get_database,
)
from annotator_backend.settings import get_settings
from tests.helpers import CATALOG, TEST_SECRET_KEY

if TYPE_CHECKING:
    from collections.abc import Iterator

os.environ.setdefault("AUTH_SECRET_KEY", TEST_SECRET_KEY)


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("AUTH_SECRET_KEY", TEST_SECRET_KEY)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def database() -> Iterator[DatabaseService]:
    """In-memory SQLite database shared across threads for one test."""
    db = DatabaseService(
        "sqlite+pysqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    BaseSchema.metadata.create_all(db.engine)
    yield db
    db.engine.dispose()


@pytest.fixture
def catalog(database: DatabaseService) -> dict[str, dict[str, int] | list[int]]:
    """Seed the catalog and return attribute IDs by name plus item IDs."""
    with database.session() as session:
        load_catalog(session, CATALOG)
    with database.session() as session:
        attributes = {
            attribute.name: attribute.id
            for attribute in session.scalars(select(AttributeSchema))
        }
        items = list(session.scalars(select(ItemSchema.id).order_by(ItemSchema.id)))
    return {"attributes": attributes, "items": items}


@pytest.fixture
def client(database: DatabaseService) -> Iterator[TestClient]:
    app = create_api()
    app.dependency_overrides[get_database] = lambda: database
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
