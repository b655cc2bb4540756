"""Error Handlers — global exception handlers for the continent API.

Invariants:
    - ContinentApiError → structured JSON envelope from exc.to_response()
    - Any other Exception → InternalServiceError envelope, never leaks internal details
    - Lookup misses never reach these handlers (ContinentLookupHandler answers them)

Design Decisions:
    - No RequestValidationError layer: no route binds a validated parameter
    - Catch-all reuses the domain envelope so every JSON error has one shape
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from continent_api.core.errors import (
    ContinentApiError, ErrorContext, InternalServiceError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register the domain and catch-all error handlers on the FastAPI app."""

    @app.exception_handler(ContinentApiError)
    async def continent_api_error_handler(
        request: Request, exc: ContinentApiError,
    ):
        logger.error(
            f"ContinentApiError: {exc.message}",
            extra={
                "error_code": exc.code, "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return _error_response(exc)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "status_code": 500},
        )
        return _error_response(InternalServiceError(
            ErrorContext(path=request.url.path),
        ))


def _error_response(exc: ContinentApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())
