"""Fixtures for server module unit tests."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_logger():
    return MagicMock()


@pytest.fixture
def mock_uvicorn_server(monkeypatch, no_signal_handlers):
    """Replace uvicorn.Server so serve() never binds a socket."""
    server = MagicMock()
    server.started = True
    server_class = MagicMock(return_value=server)
    monkeypatch.setattr("server.server.uvicorn.Server", server_class)
    return server


@pytest.fixture
def no_signal_handlers(monkeypatch):
    """Keep serve() from replacing the test runner's signal handlers."""
    installer = MagicMock()
    monkeypatch.setattr("server.server._install_signal_logging", installer)
    return installer
