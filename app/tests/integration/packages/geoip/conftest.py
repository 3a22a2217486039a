"""Test fixtures for geoip integration tests."""

import pytest
from fastapi.testclient import TestClient

from server.server import create_app


@pytest.fixture
def app(settings, geo_database):
    """Full application wired to the fake database."""
    return create_app(settings=settings, geo_database=geo_database)


@pytest.fixture
def client(app):
    """Create test client."""
    with TestClient(app) as client:
        yield client
