"""Unit tests for server.lifespan module."""

import asyncio
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI

from server import lifespan as lifespan_module
from server.lifespan import _list_configs, lifespan


@pytest.mark.unit
def test_list_configs_logs_base_settings_and_sections(settings):
    mock_logger = MagicMock()

    _list_configs(settings, mock_logger)

    events = [call.args[0] for call in mock_logger.info.call_args_list]
    assert events[0] == "configuration_initialized"
    sections = {
        call.kwargs["config_setting"]: call.kwargs["keys"]
        for call in mock_logger.info.call_args_list[1:]
    }
    assert sections["maxmind"] == ["GEO_FILE"]
    assert "PORT" in sections["server"]
    base = mock_logger.info.call_args_list[0].kwargs["base_settings"]
    assert {"MODE": "test"} in base


@pytest.mark.unit
def test_lifespan_logs_startup_and_shutdown(settings, geo_database, monkeypatch):
    mock_logger = MagicMock()
    monkeypatch.setattr(lifespan_module, "logger", mock_logger)
    app = FastAPI()
    app.state.settings = settings
    app.state.geo_database = geo_database

    async def run():
        async with lifespan(app):
            assert geo_database.closed is False

    asyncio.run(run())

    events = [call.args[0] for call in mock_logger.info.call_args_list]
    assert events[0] == "application_startup"
    assert "geo_database_ready" in events
    assert events[-1] == "application_shutdown"
    assert geo_database.closed is False
