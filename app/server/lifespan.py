from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging import get_module_logger

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log startup and shutdown around the serving period.

    The database is opened before the app exists and closed by
    ``server.server.serve`` once the listener has drained, so it is
    guaranteed open for the whole time this context is active.
    """
    settings = app.state.settings
    geo_database = app.state.geo_database

    logger.info("application_startup", mode=settings.MODE)
    _list_configs(settings, logger)
    logger.info("geo_database_ready", db_path=geo_database.db_path)

    yield

    logger.info("application_shutdown")
