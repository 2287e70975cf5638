"""
Shared fixtures.

Every test gets a fresh in-memory SQLite store with the schema
migrated, injected into the application through ``create_app``.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine

from app.core.config import Settings
from app.core.database import build_engine
from app.infrastructure.catalog.migrations import apply_migrations
from app.main import create_app

PRODUCTS_URL = "/api/products"


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment's store and origin."""
    return Settings(
        database_url="sqlite://",
        frontend_url=None,
        migrate_on_startup=False,
        log_level="INFO",
    )


@pytest.fixture
def engine() -> Engine:
    """Migrated in-memory SQLite engine."""
    engine = build_engine("sqlite://")
    apply_migrations(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def app(test_settings: Settings, engine: Engine) -> FastAPI:
    return create_app(test_settings, engine=engine)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_product(client: TestClient):
    """Create a product through the API and return its JSON payload."""

    def _create(name: str = "Teclado Hyper - Testing", price: float = 100) -> dict:
        response = client.post(PRODUCTS_URL, json={"name": name, "price": price})
        assert response.status_code == 201
        return response.json()["data"]

    return _create
