"""MaxMind integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class MaxMindSettings(IntegrationSettings):
    """MaxMind GeoIP2 City database configuration.

    Environment Variables:
        GEO_FILE: Path to the MaxMind GeoIP2/GeoLite2 City database file.
            Required at startup; an empty value fails the database open.

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        db_path = settings.maxmind.GEO_FILE
        ```
    """

    GEO_FILE: str = Field(default="", alias="GEO_FILE")
