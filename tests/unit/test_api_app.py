"""Tests for the FastAPI application wiring.

Tests the REST API layer (health, CORS, correlation IDs, routes).
"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client():
    """Create a test client for the FastAPI app."""
    from booking_api.main import app
    return TestClient(app)


class TestHealthCheck:
    """Tests for the /ping health check endpoint."""

    def test_ping_returns_ok(self, client: TestClient):
        """Health check should return ok status."""
        response = client.get("/api/ping")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["service"] == "booking-api"
        assert "timestamp" in data

    def test_health_endpoint_returns_healthy(self, client: TestClient):
        """Health router endpoint should return healthy status."""
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"


class TestCorsConfiguration:
    """Tests for CORS middleware configuration."""

    def test_cors_allows_localhost(self, client: TestClient):
        """CORS should allow the local frontend dev server."""
        response = client.options(
            "/api/health",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "GET",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


class TestCorrelationId:
    """Tests for the correlation ID middleware."""

    def test_echoes_incoming_id(self, client: TestClient):
        response = client.get("/api/health", headers={"X-Correlation-ID": "req-123"})

        assert response.headers["X-Correlation-ID"] == "req-123"

    def test_generates_id(self, client: TestClient):
        response = client.get("/api/health")

        assert response.headers["X-Correlation-ID"]


class TestRoutesRegistered:
    """Tests that all expected routes are registered."""

    def test_routes_registered(self):
        """Every router is mounted under the /api prefix."""
        from booking_api.main import app

        route_paths = {route.path for route in app.routes}

        assert {
            "/api/health",
            "/api/listings",
            "/api/listings/{listing_id}",
            "/api/listings/{listing_id}/booked-dates",
            "/api/listings/{listing_id}/calendar/{month}",
            "/api/listings/{listing_id}/selection",
            "/api/listings/{listing_id}/quote",
            "/api/bookings",
            "/api/bookings/me",
            "/api/admin/bookings",
            "/api/admin/bookings/{booking_id}/payment-status",
        } <= route_paths

    def test_lambda_handler_exists(self):
        from booking_api.main import handler

        assert callable(handler)
