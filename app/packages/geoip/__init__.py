"""Geoip package - IP to postal code / coordinates via MaxMind."""

from packages.geoip.routes import router as geoip_router
from packages.geoip.schemas import PointResponse, ZipResponse
from packages.geoip.service import (
    GeoLookupService,
    GeoLookupServiceDep,
    get_geo_lookup_service,
)

__all__ = [
    "geoip_router",
    "GeoLookupService",
    "GeoLookupServiceDep",
    "get_geo_lookup_service",
    "PointResponse",
    "ZipResponse",
]
