"""Error classifiers for geolocation database exceptions.

Converts exceptions raised by ``geoip2``/``maxminddb`` readers into
standardized OperationResult objects so the database client has a single
place deciding what counts as "not found", "bad input" or "backend failure".

Usage:
    from infrastructure.operations.classifiers import classify_geoip_error

    try:
        response = reader.city(ip_address)
    except Exception as exc:
        return classify_geoip_error(exc, ip_address)
"""

from geoip2.errors import AddressNotFoundError, GeoIP2Error
from maxminddb import InvalidDatabaseError

from infrastructure.operations.result import OperationResult


def classify_geoip_error(exc: Exception, ip_address: str) -> OperationResult:
    """Classify a geolocation reader exception into an OperationResult.

    Exception Mapping:
    - AddressNotFoundError: no record for the address → NOT_FOUND
    - ValueError: reader rejected the address syntax → PERMANENT_ERROR
    - TypeError: database type does not support City lookups → TRANSIENT_ERROR
    - InvalidDatabaseError: corrupt database contents → TRANSIENT_ERROR
    - GeoIP2Error: any other geoip2 failure → TRANSIENT_ERROR
    - Other: unexpected failure → TRANSIENT_ERROR

    Args:
        exc: Exception raised by ``geoip2.database.Reader.city``
        ip_address: The address that was being looked up

    Returns:
        OperationResult with appropriate status, message and error_code
    """
    # AddressNotFoundError subclasses GeoIP2Error; check it first
    if isinstance(exc, AddressNotFoundError):
        return OperationResult.not_found(
            f"IP address not found in database: {ip_address}",
            error_code="IP_NOT_FOUND",
        )

    if isinstance(exc, InvalidDatabaseError):
        return OperationResult.transient_error(
            f"MaxMind database is corrupt: {exc}",
            error_code="DB_CORRUPT",
        )

    if isinstance(exc, ValueError):
        return OperationResult.permanent_error(
            f"Invalid IP address format: {ip_address}",
            error_code="INVALID_IP_FORMAT",
        )

    if isinstance(exc, TypeError):
        return OperationResult.transient_error(
            f"MaxMind database does not support city lookups: {exc}",
            error_code="DB_TYPE_ERROR",
        )

    if isinstance(exc, GeoIP2Error):
        return OperationResult.transient_error(
            f"GeoIP2 database error: {exc}",
            error_code="GEOIP2_ERROR",
        )

    return OperationResult.transient_error(
        f"Unexpected error during geolocation: {type(exc).__name__}: {exc}",
        error_code="UNEXPECTED_ERROR",
    )
