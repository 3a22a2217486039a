"""geoip-service configuration settings - main aggregator."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from infrastructure.configuration.integrations import MaxMindSettings

# Infrastructure settings
from infrastructure.configuration.infrastructure import ServerSettings

RUN_MODES = frozenset({"release", "debug", "test"})


class Settings(BaseSettings):
    """geoip-service configuration settings - main aggregator.

    Aggregates the domain-specific settings into a single configuration
    object:

    - **Integrations**: the MaxMind database (``settings.maxmind``)
    - **Infrastructure**: the HTTP listener (``settings.server``)

    Environment Variables:
        MODE: Run mode, one of ``release`` (default), ``debug`` or ``test``
        LOG_LEVEL: Optional log level override (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.is_debug:
            # Debug-only behaviour...

        db_path = settings.maxmind.GEO_FILE
        port = settings.server.PORT
        ```
    """

    # Application-level settings
    MODE: str = Field(default="release", alias="MODE")
    LOG_LEVEL: Optional[str] = Field(default=None, alias="LOG_LEVEL")
    GIT_SHA: str = Field(default="Unknown", alias="GIT_SHA")

    # Integration settings
    maxmind: MaxMindSettings

    # Infrastructure settings
    server: ServerSettings

    @field_validator("MODE", mode="before")
    @classmethod
    def validate_mode(cls, v: Optional[str]) -> str:
        """Normalize MODE and reject unknown run modes."""
        if v is None or v == "":
            return "release"
        mode = str(v).strip().lower()
        if mode not in RUN_MODES:
            raise ValueError(
                f"MODE must be one of {', '.join(sorted(RUN_MODES))}, got {v!r}"
            )
        return mode

    @property
    def is_production(self) -> bool:
        """Check if the service runs in release mode.

        Returns:
            True if MODE is ``release``, False otherwise.
        """
        return self.MODE == "release"

    @property
    def is_debug(self) -> bool:
        return self.MODE == "debug"

    @property
    def effective_log_level(self) -> str:
        """Log level to configure, falling back on the run mode."""
        if self.LOG_LEVEL:
            return self.LOG_LEVEL.upper()
        return "DEBUG" if self.is_debug else "INFO"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Integrations
            "maxmind": MaxMindSettings,
            # Infrastructure
            "server": ServerSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
