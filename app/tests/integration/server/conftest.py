"""Fixtures for server integration tests."""

import pytest
from fastapi.testclient import TestClient

from server.server import create_app


@pytest.fixture
def app(settings, geo_database):
    return create_app(settings=settings, geo_database=geo_database)


@pytest.fixture
def client(app):
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
