"""Error Handlers — global exception handlers for the query-echo API.

Invariants:
    - QueryEchoError → structured JSON with error code, message, severity
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Two-layer handler: domain (QueryEchoError), catch-all (Exception)
    - Log level follows error severity (request errors log as warnings)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from query_echo.core.errors import QueryEchoError, ErrorSeverity

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register query-echo domain error handler."""

    @app.exception_handler(QueryEchoError)
    async def query_echo_error_handler(request: Request, exc: QueryEchoError):
        """Handle all query-echo domain errors."""
        if exc.context.path is None:
            exc.context.path = request.url.path
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"QueryEchoError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "parameter": exc.context.parameter,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
