"""Integration tests for /health, /healthz and /metrics endpoints."""

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from tripgen.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    return TestClient(app)


def test_root(client: TestClient) -> None:
    assert client.get("/").json()["message"] == "Trip Itinerary API"


def test_health_always_ok(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


class TestHealthzEndpoint:
    """Test /healthz endpoint."""

    @patch("tripgen.api.routes.health.check_redis")
    @patch("tripgen.api.routes.health.check_generative")
    def test_healthz_returns_200_when_all_ok(
        self,
        mock_check_generative: MagicMock,
        mock_check_redis: MagicMock,
        client: TestClient,
    ) -> None:
        mock_check_redis.return_value = (True, "ok")
        mock_check_generative.return_value = (True, "configured")

        response = client.get("/healthz")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["components"] == {"redis": "ok", "generative": "configured"}

    @patch("tripgen.api.routes.health.check_redis")
    @patch("tripgen.api.routes.health.check_generative")
    def test_healthz_returns_503_when_redis_fails(
        self,
        mock_check_generative: MagicMock,
        mock_check_redis: MagicMock,
        client: TestClient,
    ) -> None:
        mock_check_redis.return_value = (False, "error: ConnectionError")
        mock_check_generative.return_value = (True, "configured")

        response = client.get("/healthz")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "degraded"
        assert data["components"]["redis"] == "error: ConnectionError"

    def test_healthz_without_redis_configured(self, client: TestClient) -> None:
        """Test the default test config (no Redis) is healthy."""
        response = client.get("/healthz")

        assert response.status_code == 200
        assert response.json()["components"]["redis"] == "not_configured"


class TestMetricsEndpoint:
    """Test /metrics endpoint."""

    def test_metrics_exposes_generation_counters(self, client: TestClient) -> None:
        response = client.get("/metrics")

        assert response.status_code == 200
        assert "text/plain" in response.headers["content-type"]
        body = response.text
        assert "rate_limit_denials_total" in body
        assert "validation_failures_total" in body
