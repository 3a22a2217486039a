"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import GeoDatabaseDep
from infrastructure.services.providers import (
    get_geo_database,
    get_settings,
)

__all__ = [
    "GeoDatabaseDep",
    "get_settings",
    "get_geo_database",
]
