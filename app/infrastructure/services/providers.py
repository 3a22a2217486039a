"""
Factory functions for dependency injection.

Provides application-scoped providers for core infrastructure services.
"""

from functools import lru_cache

from fastapi import Request

from infrastructure.clients.maxmind import MaxMindClient
from infrastructure.configuration import Settings


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Tests that change the environment call ``get_settings.cache_clear()``.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


def get_geo_database(request: Request) -> MaxMindClient:
    """
    Get the process-wide MaxMind client attached to the application.

    The client is opened before the listener binds and stored on
    ``app.state.geo_database`` by ``server.server.create_app``; it is not
    cached here because its lifetime belongs to the process lifecycle.

    Usage:
        @router.get("/lookup")
        def lookup(ip: str, database: GeoDatabaseDep):
            return database.query(ip)

    Returns:
        MaxMindClient: The open database client.
    """
    return request.app.state.geo_database
