"""Error Handlers — global exception handlers for the catalog API.

Invariants:
    - CatalogError → its own to_response() envelope and http_status
    - RequestValidationError (malformed JSON, non-object body) → 400 Validation Error
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (CatalogError), framework validation, catch-all
    - Client errors log at WARNING, server errors at ERROR with traceback
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from catalog.core.errors import CatalogError, ErrorSeverity

logger = logging.getLogger(__name__)

INTERNAL_ERROR_RESPONSE = {
    "error": "Internal Server Error",
    "message": "An unexpected error occurred",
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_catalog_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_catalog_error_handler(app: FastAPI) -> None:
    """Register catalog domain/infrastructure error handler."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        """Handle all catalog domain/infrastructure errors."""
        level = (
            logging.ERROR if exc.severity == ErrorSeverity.CRITICAL
            else logging.WARNING
        )
        logger.log(
            level,
            f"CatalogError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register framework-level request validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed request data before it reaches a route."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Validation Error", "message": "Invalid request data"},
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=INTERNAL_ERROR_RESPONSE,
        )
