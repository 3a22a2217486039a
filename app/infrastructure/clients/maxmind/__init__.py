"""MaxMind GeoIP2 client for the infrastructure layer.

Public API (Package Level):
- MaxMindClient: Process-lifetime client for City database lookups
- GeoLocationData: Location record returned by successful lookups
- GeoDatabaseOpenError: Raised when the database cannot be opened

Note: request handlers should reach the client through
infrastructure.services (GeoDatabaseDep), not by opening their own.

Developer Usage:
    from infrastructure.clients.maxmind import MaxMindClient

    client = MaxMindClient.open("/data/GeoLite2-City.mmdb")
    result = client.query("8.8.8.8")
    if result.is_success:
        print(result.data.postal_code)
    client.close()
"""

from infrastructure.clients.maxmind.client import (
    GeoDatabaseOpenError,
    GeoLocationData,
    MaxMindClient,
)

__all__ = [
    "MaxMindClient",
    "GeoLocationData",
    "GeoDatabaseOpenError",
]
