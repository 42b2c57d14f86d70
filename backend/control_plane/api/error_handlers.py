"""Error Handlers: global exception handlers for the control-plane API.

Invariants:
    - ControlPlaneError -> structured JSON with error code, message, severity
    - RequestValidationError -> 400 with field-level error details
    - Exception (catch-all) -> 500, never leaks internal details, still carries CORS headers
    - InternalError is not logged here: the service that saw the
      cause already logged it once

Design Decisions:
    - Three-layer handler: domain (ControlPlaneError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py: create_app only wires
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError

from control_plane.api.middleware import CORS_HEADERS
from control_plane.api.responses import UTF8JSONResponse
from control_plane.core.errors import ControlPlaneError, ErrorSeverity, InternalError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_control_plane_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_control_plane_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(ControlPlaneError)
    async def control_plane_error_handler(request: Request, exc: ControlPlaneError):
        """Handle all control-plane domain/infrastructure errors."""
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "slug": exc.context.slug,
        }
        if exc.http_status < 500:
            logger.info(f"{exc.code}: {exc.message}", extra=extra)
        elif not isinstance(exc, InternalError):
            logger.error(f"{exc.code}: {exc.message}", extra=extra)
        return UTF8JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return UTF8JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        # built by ServerErrorMiddleware, outside cors_middleware
        return UTF8JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            headers=CORS_HEADERS,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "internal error",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
