"""Structlog configuration and logger setup.

Configures structlog on top of the standard library ``logging`` module with
callsite context, exception formatting and mode-aware rendering: JSON lines
in release mode, a console renderer otherwise. uvicorn's loggers propagate to
the root logger configured here.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    # Configure logging at process start
    logger = configure_logging(settings=settings)

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
import sys
from typing import TYPE_CHECKING, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.logging.formatters import (
    add_app_info,
    add_environment_info,
    mask_sensitive_data,
    truncate_large_values,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

APP_NAME = "geoip-service"


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def configure_logging(
    settings: "Settings",
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging for the process.

    Args:
        settings: Application settings; supplies the run mode, log level and
            deployment SHA.
        log_level: Optional override for the log level (DEBUG, INFO, ...).
            Defaults to ``settings.effective_log_level``.
        is_production: Optional override for release rendering. Defaults to
            ``settings.is_production``. Controls JSON vs console output.

    Returns:
        Configured logger instance
    """
    # Suppress all logging during tests
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)

        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    prod_mode = is_production if is_production is not None else settings.is_production

    processors = [
        # Correlation ids and request metadata bound by the request middleware
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        add_app_info(APP_NAME, settings.GIT_SHA),
        add_environment_info(settings.MODE),
        mask_sensitive_data(),
        truncate_large_values(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if not prod_mode:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.effective_log_level
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
        force=True,
    )

    return structlog.stdlib.get_logger()


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a lazily configured logger bound to ``logger_name``.

    Args:
        name: Optional logger name. Defaults to the calling module's name.

    Returns:
        Logger proxy that picks up the configuration active at first use
    """
    if name:
        return structlog.stdlib.get_logger(logger_name=name)

    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module:
        return structlog.stdlib.get_logger(logger_name=module.__name__)

    return structlog.stdlib.get_logger(logger_name="unknown")


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    Binds ``component`` and ``module_path``. The returned logger is a lazy
    proxy, so module-level loggers created at import time still honour the
    configuration applied later by ``configure_logging``.

    Example:
        # In packages/geoip/service.py
        logger = get_module_logger()
        # logger has context: {"component": "service", "module_path": "packages.geoip.service"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module:
        module_name = module.__name__
        return structlog.stdlib.get_logger(
            component=module_name.split(".")[-1],
            module_path=module_name,
        )

    return structlog.stdlib.get_logger(component="unknown")
