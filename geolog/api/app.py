"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from geolog.api.routes import health, templates
from geolog.config import APP_DESCRIPTION, APP_NAME, VERSION
from geolog.utilities.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    from geolog.connectors import get_connector_registry
    from geolog.templates import get_registry

    setup_logging()
    logger.info(
        "Starting %s %s (%d templates, connectors: %s)",
        APP_NAME,
        VERSION,
        get_registry().count(),
        ", ".join(get_connector_registry().connector_names()) or "none",
    )

    yield

    logger.info("%s stopped", APP_NAME)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="geolog API",
        description=APP_DESCRIPTION,
        version=VERSION,
        lifespan=lifespan,
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(templates.router, prefix="/api/v1", tags=["Log Templates"])

    return app
