"""HTTP listener infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """HTTP listener and process lifecycle configuration.

    Environment Variables:
        HOST: Bind address (default: 0.0.0.0)
        PORT: Listen port (default: 3000)
        SHUTDOWN_GRACE_SECONDS: Time in-flight requests get to finish after a
            termination signal before connections are force-closed (default: 5)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        port = settings.server.PORT
        grace = settings.server.SHUTDOWN_GRACE_SECONDS
        ```
    """

    HOST: str = Field(default="0.0.0.0", alias="HOST")
    PORT: int = Field(default=3000, ge=1, le=65535, alias="PORT")
    SHUTDOWN_GRACE_SECONDS: int = Field(default=5, ge=0, alias="SHUTDOWN_GRACE_SECONDS")
