"""
tests.api.conftest

Shared pytest fixtures for API tests.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from request_scope.main import create_app
from request_scope.settings import Settings


@pytest.fixture()
def app_factory():
    """
    Factory fixture for a fresh app; tests may add routes before wrapping it in a client.
    """

    def _make(config: dict | None = None, settings: Settings | None = None):
        return create_app(config=config, settings=settings)

    return _make


@pytest.fixture()
def client_factory(app_factory):
    def _make(config: dict | None = None, *, app=None, raise_server_exceptions: bool = True) -> TestClient:
        return TestClient(app or app_factory(config), raise_server_exceptions=raise_server_exceptions)

    return _make


@pytest.fixture()
def client(client_factory) -> TestClient:
    """Alias for simple tests that need no config."""
    return client_factory()
