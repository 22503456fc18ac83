"""Shared fixtures for API tests."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from giftshop.infrastructure.config import settings
from giftshop.infrastructure.database import create_schema, drop_schema
from giftshop.main import app


async def _reset_schema() -> None:
    await drop_schema()
    await create_schema()


@pytest.fixture(autouse=True)
def fresh_database() -> None:
    """Start every API test on empty tables."""
    asyncio.run(_reset_schema())


@pytest.fixture
def client() -> TestClient:
    """Create test client without authentication."""
    return TestClient(app)


@pytest.fixture
def auth_client() -> TestClient:
    """Create test client with valid API key authentication."""
    return TestClient(
        app,
        headers={"Authorization": f"Bearer {settings.giftshop_api_key}"},
    )


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Get authentication headers."""
    return {"Authorization": f"Bearer {settings.giftshop_api_key}"}


@pytest.fixture
def category_id(auth_client: TestClient) -> int:
    """Create a category through the API and return its id."""
    response = auth_client.post(
        "/api/categories",
        json={
            "name": "교환권",
            "color": "#6c95d1",
            "image_url": "https://example.com/voucher.png",
            "description": "Vouchers",
        },
    )
    assert response.status_code == 201
    return response.json()["id"]


@pytest.fixture
def product_payload(category_id: int) -> dict:
    """Valid product creation body."""
    return {
        "name": "아이스 아메리카노",
        "price": 4500,
        "image_url": "https://example.com/americano.jpg",
        "category_id": category_id,
        "options": [
            {"name": "Tall", "quantity": 100},
            {"name": "Grande", "quantity": 50},
        ],
    }
