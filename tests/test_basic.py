"""
Basic application tests.

Validates that the FastAPI app starts correctly and the
health endpoint responds as expected.
"""

import logging

from fastapi.testclient import TestClient

from uservalidation.core.config import settings
from uservalidation.main import app
from uservalidation.shared.logging import resolve_level

client = TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200

    def test_health_response_body(self) -> None:
        """Health endpoint must return status and version fields."""
        body = client.get("/api/v1/health").json()
        assert body == {"status": "ok", "version": settings.version}


class TestAppState:
    """Shared collaborators are built once at startup."""

    def test_catalog_and_mapper_on_state(self) -> None:
        assert set(app.state.catalog.supported_locales) == {"en", "de", "fr"}
        assert app.state.problem_mapper.type_uri == settings.error_uri

    def test_limiter_follows_settings(self) -> None:
        assert app.state.limiter.enabled is settings.rate_limit_enabled
        assert len(app.state.write_guards) == 1

    def test_docs_disabled_without_debug(self) -> None:
        assert client.get("/docs").status_code == 404


class TestLogging:
    """Tests for logging configuration helpers."""

    def test_resolve_level(self) -> None:
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level(" ERROR ") == logging.ERROR
        assert resolve_level("nonsense") == logging.INFO
