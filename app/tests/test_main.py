"""Tests for the process entry point."""

from unittest.mock import MagicMock

import pytest

import main


@pytest.fixture
def mock_serve(monkeypatch):
    serve = MagicMock(return_value=0)
    monkeypatch.setattr(main, "serve", serve)
    return serve


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    monkeypatch.setattr(main, "load_dotenv", MagicMock())


@pytest.mark.integration
def test_missing_geo_file_exits_before_serving(monkeypatch, tmp_path, mock_serve):
    monkeypatch.setenv("GEO_FILE", str(tmp_path / "does-not-exist.mmdb"))

    assert main.main() == 1
    mock_serve.assert_not_called()


@pytest.mark.integration
def test_unset_geo_file_exits_before_serving(mock_serve):
    assert main.main() == 1
    mock_serve.assert_not_called()


@pytest.mark.integration
def test_invalid_configuration_exits_before_serving(monkeypatch, mock_serve):
    monkeypatch.setenv("MODE", "staging")

    assert main.main() == 1
    mock_serve.assert_not_called()


@pytest.mark.integration
def test_opens_database_then_serves(monkeypatch, mock_reader, mock_serve):
    monkeypatch.setenv("GEO_FILE", "/data/GeoLite2-City.mmdb")
    monkeypatch.setenv("PORT", "3100")
    reader_class = MagicMock(return_value=mock_reader)
    monkeypatch.setattr("geoip2.database.Reader", reader_class)

    assert main.main() == 0

    reader_class.assert_called_once_with("/data/GeoLite2-City.mmdb")
    app, settings, geo_database, _logger = mock_serve.call_args.args
    assert app.state.geo_database is geo_database
    assert settings.server.PORT == 3100
    assert geo_database.closed is False


@pytest.mark.integration
def test_exit_status_comes_from_serve(monkeypatch, mock_reader, mock_serve):
    monkeypatch.setenv("GEO_FILE", "/data/GeoLite2-City.mmdb")
    monkeypatch.setattr("geoip2.database.Reader", MagicMock(return_value=mock_reader))
    mock_serve.return_value = 1

    assert main.main() == 1


@pytest.mark.integration
def test_run_exits_with_main_status(monkeypatch):
    monkeypatch.setattr(main, "main", MagicMock(return_value=1))

    with pytest.raises(SystemExit) as exc_info:
        main.run()

    assert exc_info.value.code == 1
