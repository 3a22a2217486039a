import signal

import uvicorn
from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from api.router import api_router
from infrastructure.clients.maxmind import MaxMindClient
from infrastructure.configuration import Settings
from server.lifespan import lifespan
from server.request_context_middleware import RequestContextMiddleware

HANDLED_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def create_app(settings: Settings, geo_database: MaxMindClient) -> FastAPI:
    """Build the HTTP application around an already open database.

    Args:
        settings: Application settings
        geo_database: Open MaxMind client, shared read-only by all requests

    Returns:
        FastAPI: Application with system and geo routes mounted
    """
    handler = FastAPI(
        title="geoip-service",
        debug=settings.is_debug,
        lifespan=lifespan,
    )
    handler.state.settings = settings
    handler.state.geo_database = geo_database

    handler.add_middleware(RequestContextMiddleware)
    handler.include_router(api_router)
    return handler


def _install_signal_logging(server: uvicorn.Server, logger: BoundLogger) -> None:
    # uvicorn swaps in its own handlers while serving and replays captured
    # signals to the previous ones on exit; these make that replay a log line
    # instead of an interrupt or an abrupt SIGTERM exit. A signal arriving
    # before uvicorn takes over still has to stop the server.
    def handle_signal(signum, frame):  # pylint: disable=unused-argument
        logger.info("shutdown_signal_received", signal=signal.Signals(signum).name)
        server.should_exit = True

    for sig in HANDLED_SIGNALS:
        signal.signal(sig, handle_signal)


def serve(
    app: FastAPI,
    settings: Settings,
    geo_database: MaxMindClient,
    logger: BoundLogger,
) -> int:
    """Run the listener until SIGINT/SIGTERM, then drain and close the database.

    On a termination signal uvicorn stops accepting connections and gives
    in-flight requests ``SHUTDOWN_GRACE_SECONDS`` before cancelling them.
    The database is closed after the listener has stopped, whatever the
    outcome.

    Returns:
        int: Process exit status, 0 after a graceful shutdown
    """
    config = uvicorn.Config(
        app,
        host=settings.server.HOST,
        port=settings.server.PORT,
        timeout_graceful_shutdown=settings.server.SHUTDOWN_GRACE_SECONDS,
        log_config=None,
        access_log=settings.is_debug,
    )
    server = uvicorn.Server(config)

    _install_signal_logging(server, logger)
    logger.info(
        "server_starting",
        host=settings.server.HOST,
        port=settings.server.PORT,
    )
    try:
        server.run()
    except Exception as exc:  # pylint: disable=broad-except
        logger.exception("server_forced_shutdown_failed", error=str(exc))
        return 1
    finally:
        geo_database.close()

    if not server.started:
        logger.error("server_start_failed", port=settings.server.PORT)
        return 1

    logger.info("server_exiting")
    return 0
