import logging
import sys
import time
from datetime import datetime, timezone
from typing import Callable, Optional

import uvicorn
from fastapi import FastAPI
from pydantic import ValidationError

from s2i_demo.config.settings import Settings, get_settings
from s2i_demo.constants.app_constants import APP_VERSION, ENDPOINT_PATHS
from s2i_demo.routes import router as app_routes

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def create_app(
    settings: Optional[Settings] = None,
    clock: Optional[Callable[[], float]] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    The start time is captured here, once, and read by the health
    endpoint through app.state. ``clock`` defaults to time.monotonic.
    """
    settings = settings or get_settings()
    clock = clock or time.monotonic

    # Paths are matched exactly, so "/health/" is a 404 rather than a redirect
    app = FastAPI(
        title=settings.APP_NAME,
        version=APP_VERSION,
        description="Demo service built with OpenShift S2I",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    app.state.settings = settings
    app.state.clock = clock
    app.state.start_time = clock()
    app.state.started_at = datetime.now(timezone.utc)

    # Routes setup
    app.include_router(app_routes)

    return app


def log_endpoints(port: int, started_at: datetime) -> None:
    logger.info("Starting server on port %s (started at %s)...", port, started_at.isoformat())
    logger.info("Endpoints available:")
    for path in ENDPOINT_PATHS:
        logger.info("  - http://localhost:%s%s", port, path)


def run() -> None:
    """Console entry point: load settings, then serve until terminated"""
    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging()
        logger.error("Server failed to start: invalid configuration: %s", e)
        sys.exit(1)

    configure_logging(settings.LOG_LEVEL)
    app = create_app(settings)
    log_endpoints(settings.PORT, app.state.started_at)

    # uvicorn logs bind failures and exits with status 1
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)
