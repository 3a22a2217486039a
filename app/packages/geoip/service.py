"""
Business logic for resolving IP addresses to locations.

This module contains transport-agnostic lookup logic. HTTP routes and any
other front end should go through GeoLookupService rather than querying the
database client directly, so validation and outcome mapping live in one place.

Outcomes (all OperationResult):
- SUCCESS: ``data`` is a GeoLocationData
- PERMANENT_ERROR (INVALID_IP_FORMAT): the input is not an IP address
- NOT_FOUND (IP_NOT_FOUND): the database has no record for the address
- TRANSIENT_ERROR: any other database failure
"""

import ipaddress
from typing import Annotated, Optional

from fastapi import Depends

from infrastructure.clients.maxmind import MaxMindClient
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, OperationStatus
from infrastructure.services import GeoDatabaseDep

logger = get_module_logger()


class GeoLookupService:
    """Validate IP strings and resolve them against the geolocation database.

    Stateless apart from the injected client: every call re-queries.

    Args:
        database: Open MaxMind client
    """

    def __init__(self, database: MaxMindClient) -> None:
        self._database = database

    def resolve(self, ip_address: Optional[str]) -> OperationResult:
        """
        Resolve an IP address to its location record.

        Args:
            ip_address: Raw client-supplied string, possibly None or empty

        Returns:
            OperationResult with GeoLocationData or error
        """
        log = logger.bind(ip_address=ip_address, operation="resolve")

        try:
            address = ipaddress.ip_address(ip_address or "")
            # Zoned IPv6 literals (fe80::1%eth0) name a local interface, not a host
            if getattr(address, "scope_id", None) is not None:
                raise ValueError(f"IPv6 zone id is not allowed: {ip_address!r}")
        except ValueError:
            log.debug("invalid_ip_format")
            return OperationResult.permanent_error(
                message=f"Invalid IP address format: {ip_address!r}",
                error_code="INVALID_IP_FORMAT",
            )

        result = self._database.query(str(address))

        if result.is_success:
            log.debug("geo_lookup_success")
            return result

        if result.status == OperationStatus.NOT_FOUND:
            log.warning("geo_lookup_not_found", error=result.message)
            return result

        # The address already validated, so any other failure is the backend's
        log.error(
            "geo_lookup_failed",
            status=result.status.value,
            error_code=result.error_code,
            error=result.message,
        )
        return OperationResult.transient_error(
            message=result.message,
            error_code=result.error_code or "GEOIP2_ERROR",
        )


def get_geo_lookup_service(database: GeoDatabaseDep) -> GeoLookupService:
    """Build the lookup service around the application's database client."""
    return GeoLookupService(database)


GeoLookupServiceDep = Annotated[GeoLookupService, Depends(get_geo_lookup_service)]
