"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides an API client over an in-memory store and storefront fixtures.

==============================================================================
"""

from typing import Any, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from catalog.client.api import ProductApi
from catalog.client.controller import ProductControl
from catalog.core.config import Settings
from catalog.main import create_app


# ============================================================================
# APP FIXTURES
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    """Test settings: in-memory SQLite store, no .env file."""
    return Settings(_env_file=None, ENVIRONMENT="test", DATABASE_URL_TEST="sqlite://")


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """A fresh app, and therefore a fresh store, for each test."""
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Test client with the app lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


# ============================================================================
# DATA FIXTURES
# ============================================================================

@pytest.fixture
def widget_fields() -> dict[str, Any]:
    return {"name": "Widget", "price": 9.99, "quantity": 3}


@pytest.fixture
def widget(client: TestClient, widget_fields: dict[str, Any]) -> dict[str, Any]:
    """A product created through the API."""
    response = client.post("/api/products", json=widget_fields)
    assert response.status_code == 201
    return response.json()


# ============================================================================
# STOREFRONT FIXTURES
# ============================================================================

@pytest.fixture
def api(client: TestClient) -> ProductApi:
    """Storefront API client talking to the in-process app."""
    return ProductApi(client=client)


@pytest.fixture
def control(api: ProductApi) -> ProductControl:
    return ProductControl(api)
