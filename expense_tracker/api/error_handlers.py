"""Error Handlers - global exception handlers for the Expense Tracker API.

Invariants:
    - ExpenseTrackerError → structured JSON with error code, message, severity
    - RequestValidationError → 400 with field-level error details
      (malformed JSON, wrong field types, unparseable dates, non-integer ids)
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (ExpenseTrackerError), validation (Pydantic), catch-all
    - Validation failures answer 400, not FastAPI's default 422,
      for bodies, dates and path ids alike
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from expense_tracker.core.errors import (
    ErrorCategory, ErrorSeverity, ExpenseTrackerError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Expense Tracker domain/infrastructure error handler."""

    @app.exception_handler(ExpenseTrackerError)
    async def expense_tracker_error_handler(
        request: Request, exc: ExpenseTrackerError,
    ):
        """Handle all Expense Tracker domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
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
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
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
            "category": ErrorCategory.VALIDATION.value,
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
