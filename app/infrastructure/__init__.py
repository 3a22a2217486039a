"""Infrastructure modules for geoip-service.

Centralized infrastructure components:
- clients: MaxMind database client (MaxMindClient, GeoLocationData)
- configuration: Settings management (Settings)
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Operation results and error classification
- services: Dependency injection services (GeoDatabaseDep, get_settings)
"""
