"""Tests for health check endpoints."""

from unittest.mock import patch

from bakery_catalog.core.services import DbSessionService


class TestHealthEndpoints:
    """Liveness and readiness probes."""

    def test_root_greeting(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == "Hello, World!"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_ready_with_database(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["checks"]["database"]["status"] == "healthy"

    def test_not_ready_without_database(self, client):
        with patch.object(DbSessionService, "health_check", return_value=False):
            response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"

    def test_database_health_reports_pool(self, client):
        response = client.get("/health/database")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert "checked_out" in body["pool"]

    def test_security_headers(self, client):
        response = client.get("/health")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
