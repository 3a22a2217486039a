import sys

import structlog
from dotenv import load_dotenv
from pydantic import ValidationError

from infrastructure.clients.maxmind import GeoDatabaseOpenError, MaxMindClient
from infrastructure.logging import configure_logging
from infrastructure.services import get_settings
from server.server import create_app, serve


def main() -> int:
    """Start the service and block until it shuts down.

    Startup is strictly ordered: settings, logging, database, then the
    listener. A database that cannot be opened aborts before anything binds.

    Returns:
        int: Process exit status
    """
    load_dotenv()

    try:
        settings = get_settings()
    except ValidationError as exc:
        structlog.get_logger().error("configuration_invalid", error=str(exc))
        return 1

    logger = configure_logging(settings=settings)
    logger.info("service_starting", mode=settings.MODE, port=settings.server.PORT)

    try:
        geo_database = MaxMindClient.from_settings(settings)
    except GeoDatabaseOpenError as exc:
        logger.error(
            "geo_database_open_failed",
            db_path=exc.db_path,
            error=exc.reason,
        )
        return 1

    app = create_app(settings=settings, geo_database=geo_database)
    return serve(app, settings, geo_database, logger)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
