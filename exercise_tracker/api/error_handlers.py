"""Error Handlers — global exception handlers for the exercise tracker API.

Invariants:
    - ExerciseTrackerError → {"error": message, "code": code} with the error's HTTP status
    - RequestValidationError → same envelope, 400
    - Exception (catch-all) → same envelope, 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain, validation (framework), catch-all (Exception)
    - One envelope for every endpoint: clients branch on the "error" key only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from exercise_tracker.core.errors import ExerciseTrackerError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(ExerciseTrackerError)
    async def domain_error_handler(request: Request, exc: ExerciseTrackerError):
        """Handle all exercise tracker domain/infrastructure errors."""
        log = (
            logger.error if exc.severity == ErrorSeverity.CRITICAL
            else logger.warning
        )
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "error_category": exc.category.value,
                "occurred_at": exc.context.timestamp.isoformat(),
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register request validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle framework-level request validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
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
            content={"error": "Server error", "code": "INTERNAL_ERROR"},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build validation error response naming the first offending field."""
    errors = exc.errors()
    if not errors:
        return {"error": "Invalid request data", "code": "VALIDATION_ERROR"}
    first = errors[0]
    field = ".".join(str(loc) for loc in first["loc"] if loc not in ("body", "query"))
    return {
        "error": f"Invalid {field}: {first['msg']}" if field else first["msg"],
        "code": "VALIDATION_ERROR",
    }
