"""Tests for health check endpoints."""

import pytest
from fastapi.testclient import TestClient

from giftshop.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    return TestClient(app)


def test_health_check(client: TestClient) -> None:
    """Test health endpoint returns healthy status."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "giftshop-api"
    assert "version" in data


def test_readiness_check(client: TestClient) -> None:
    """Test readiness endpoint pings the database."""
    response = client.get("/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready"}


def test_readiness_reports_unreachable_database(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test readiness endpoint returns 503 when the ping fails."""
    from giftshop.infrastructure import database

    async def failing_ping() -> None:
        raise ConnectionError("database is down")

    monkeypatch.setattr(database, "ping", failing_ping)

    response = client.get("/ready")
    assert response.status_code == 503
    assert response.json()["status"] == "unavailable"
