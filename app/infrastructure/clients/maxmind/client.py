"""MaxMind GeoIP2 client for geolocation lookups.

Owns a single ``geoip2.database.Reader`` for the process lifetime: opened
once at startup, queried concurrently by request handlers, closed once at
shutdown. Queries return OperationResult so handlers never see reader
exceptions.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

import geoip2.database
import structlog
from maxminddb import InvalidDatabaseError

from infrastructure.operations import OperationResult, classify_geoip_error

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger()


class GeoDatabaseOpenError(Exception):
    """Raised when the geolocation database cannot be opened."""

    def __init__(self, db_path: str, reason: str) -> None:
        super().__init__(f"Unable to open MaxMind database {db_path!r}: {reason}")
        self.db_path = db_path
        self.reason = reason


@dataclass(frozen=True)
class GeoLocationData:
    """Location record for an IP address.

    Missing database fields come back as an empty postal code and a
    ``(0.0, 0.0)`` point.
    """

    postal_code: str = ""
    latitude: float = 0.0
    longitude: float = 0.0


class MaxMindClient:
    """Client for MaxMind GeoIP2 City database lookups.

    Use :meth:`open` to construct; the reader is read-only after opening and
    safe to share between concurrent requests without locking.

    Args:
        reader: An open ``geoip2.database.Reader``
        db_path: Path the reader was opened from, for logging
    """

    def __init__(self, reader: geoip2.database.Reader, db_path: str) -> None:
        self._reader = reader
        self._db_path = db_path
        self._closed = False
        self._logger = logger.bind(component="maxmind_client", db_path=db_path)

    @classmethod
    def open(cls, db_path: str) -> "MaxMindClient":
        """Open the database at ``db_path``.

        Raises:
            GeoDatabaseOpenError: if the path is empty, the file is missing
                or unreadable, or it is not a MaxMind database
        """
        if not db_path:
            raise GeoDatabaseOpenError(db_path, "GEO_FILE is not set")

        try:
            reader = geoip2.database.Reader(db_path)
        except (OSError, InvalidDatabaseError, ValueError) as e:
            raise GeoDatabaseOpenError(db_path, str(e)) from e

        client = cls(reader, db_path)
        client._logger.info("geo_database_opened", **client.metadata())
        return client

    @classmethod
    def from_settings(cls, settings: "Settings") -> "MaxMindClient":
        """Open the database configured by ``settings.maxmind.GEO_FILE``."""
        return cls.open(settings.maxmind.GEO_FILE)

    @property
    def db_path(self) -> str:
        return self._db_path

    @property
    def closed(self) -> bool:
        return self._closed

    def metadata(self) -> dict[str, Any]:
        """Describe the open database (type, build epoch, node count)."""
        meta = self._reader.metadata()
        return {
            "database_type": meta.database_type,
            "build_epoch": meta.build_epoch,
            "node_count": meta.node_count,
        }

    def query(self, ip_address: str) -> OperationResult:
        """Look up the City record for an IP address.

        Args:
            ip_address: IPv4 or IPv6 address in textual form

        Returns:
            OperationResult with GeoLocationData on success, NOT_FOUND when
            the database has no record, or an error result otherwise
        """
        log = self._logger.bind(ip_address=ip_address)

        if self._closed:
            log.error("geo_database_closed")
            return OperationResult.transient_error(
                "MaxMind database is closed",
                error_code="DB_CLOSED",
            )

        try:
            response = self._reader.city(ip_address)
        except Exception as e:  # pylint: disable=broad-except
            result = classify_geoip_error(e, ip_address)
            log.debug("geo_query_failed", error_code=result.error_code, error=str(e))
            return result

        location = GeoLocationData(
            postal_code=response.postal.code or "",
            latitude=_coordinate(response.location.latitude),
            longitude=_coordinate(response.location.longitude),
        )
        log.debug("geo_query_success", postal_code=location.postal_code)
        return OperationResult.success(data=location, message="IP geolocated successfully")

    def close(self) -> None:
        """Release the reader. Calling it again is a no-op."""
        if self._closed:
            return
        self._closed = True
        self._reader.close()
        self._logger.info("geo_database_closed")


def _coordinate(value: Optional[float]) -> float:
    return float(value) if value is not None else 0.0
