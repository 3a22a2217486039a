from unittest.mock import Mock

import pytest
from geoip2.errors import AddressNotFoundError

from infrastructure.clients.maxmind import MaxMindClient
from infrastructure.configuration import MaxMindSettings, ServerSettings, Settings
from infrastructure.logging import configure_logging
from infrastructure.services import get_settings

GEO_ENV_VARS = (
    "MODE",
    "PORT",
    "HOST",
    "GEO_FILE",
    "LOG_LEVEL",
    "GIT_SHA",
    "SHUTDOWN_GRACE_SECONDS",
)


def make_city_response(postal_code="94043", latitude=37.4, longitude=-122.1):
    """Build a stand-in for ``geoip2.models.City`` with the fields we read."""
    response = Mock()
    response.postal.code = postal_code
    response.location.latitude = latitude
    response.location.longitude = longitude
    return response


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate every test from the developer's environment and cached settings."""
    for name in GEO_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Settings for a test run pointing at a fake database path."""
    return Settings(
        MODE="test",
        maxmind=MaxMindSettings(GEO_FILE="/data/GeoLite2-City.mmdb"),
        server=ServerSettings(PORT=3000),
    )


@pytest.fixture(autouse=True)
def quiet_logging(settings):
    configure_logging(settings=settings)


@pytest.fixture
def city_records():
    """IP → City response mapping served by the fake reader."""
    return {
        "8.8.8.8": make_city_response("94043", 37.4, -122.1),
        "2001:4860:4860::8888": make_city_response("94043", 37.751, -97.822),
        "81.2.69.142": make_city_response(None, 51.5142, -0.0931),
    }


@pytest.fixture
def mock_reader(city_records):
    """A ``geoip2.database.Reader`` double backed by ``city_records``."""

    def city(ip_address):
        if ip_address not in city_records:
            raise AddressNotFoundError(
                f"The address {ip_address} is not in the database."
            )
        return city_records[ip_address]

    reader = Mock()
    reader.city.side_effect = city
    reader.metadata.return_value = Mock(
        database_type="GeoLite2-City", build_epoch=1700000000, node_count=42
    )
    return reader


@pytest.fixture
def geo_database(mock_reader):
    """An open MaxMindClient wrapping the fake reader."""
    return MaxMindClient(mock_reader, "/data/GeoLite2-City.mmdb")
