"""Infrastructure configuration module - public API.

Centralized configuration management for geoip-service using Pydantic
BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class
    MaxMindSettings: Geolocation database settings class (for testing)
    ServerSettings: HTTP listener settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    db_path = settings.maxmind.GEO_FILE
    port = settings.server.PORT
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.integrations import MaxMindSettings
from infrastructure.configuration.infrastructure import ServerSettings

__all__ = ["Settings", "MaxMindSettings", "ServerSettings"]
