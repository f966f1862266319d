"""query-echo API — FastAPI application entry point.

Invariants:
    - Routes registered from the explicit route table (no auto-discovery)
    - Global error handlers map QueryEchoError → structured JSON responses
    - No interactive docs or schema endpoints: GET /api/sample is the whole surface
    - Logging configured on startup via lifespan context manager

Usage:
    uvicorn query_echo.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from query_echo import __version__
from query_echo.api.error_handlers import register_error_handlers
from query_echo.api.routes import register_routes
from query_echo.config import Settings, get_settings
from query_echo.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application: route table plus error handlers."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        handler = setup_logging(settings.log_level, settings.log_format)
        logger.info(f"{settings.app_name} API started")
        yield
        logger.info(f"{settings.app_name} API shutting down")
        logging.root.removeHandler(handler)

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    register_routes(app)
    register_error_handlers(app)
    return app


app = create_app()
