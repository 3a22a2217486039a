"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.clients.maxmind import MaxMindClient
from infrastructure.services.providers import get_geo_database

# Open geolocation database owned by the process lifecycle
GeoDatabaseDep = Annotated[MaxMindClient, Depends(get_geo_database)]

__all__ = [
    "GeoDatabaseDep",
]
