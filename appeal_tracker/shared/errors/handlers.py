"""
Centralized error handlers for FastAPI.

Maps appeal domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from appeal_tracker.domain.appeals.errors import (
    AppealConflictError,
    AppealDomainError,
    AppealNotFoundError,
    AppealStorageError,
    AppealValidationError,
    InvalidTransitionError,
)

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_409 = 409
HTTP_422 = 422
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed requests (missing fields, bad dates) in the common error shape."""
        errors = exc.errors()
        detail = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in errors
        )
        logger.warning("Request validation failed with %d error(s)", len(errors))
        return _error_response(HTTP_422, "Validation error", detail)

    @app.exception_handler(AppealValidationError)
    async def handle_validation(
        _request: Request, exc: AppealValidationError
    ) -> JSONResponse:
        """Handle missing or malformed input."""
        logger.warning("Invalid input for field %s", exc.field)
        return _error_response(HTTP_422, "Validation error", exc.message)

    @app.exception_handler(AppealNotFoundError)
    async def handle_not_found(
        _request: Request, exc: AppealNotFoundError
    ) -> JSONResponse:
        """Handle missing appeal errors."""
        logger.warning("Appeal not found: %s", exc.appeal_id)
        return _error_response(HTTP_404, "Appeal not found", exc.message)

    @app.exception_handler(InvalidTransitionError)
    async def handle_invalid_transition(
        _request: Request, exc: InvalidTransitionError
    ) -> JSONResponse:
        """Handle operations that are illegal from the current status."""
        logger.warning(
            "Rejected %s from status %s", exc.operation, exc.current_status
        )
        return _error_response(HTTP_409, "Invalid status transition", exc.message)

    @app.exception_handler(AppealConflictError)
    async def handle_conflict(
        _request: Request, exc: AppealConflictError
    ) -> JSONResponse:
        """Handle concurrent modification of the same appeal."""
        logger.warning("Concurrent update on appeal %s", exc.appeal_id)
        return _error_response(HTTP_409, "Appeal was modified concurrently", exc.message)

    @app.exception_handler(AppealStorageError)
    async def handle_storage(
        _request: Request, exc: AppealStorageError
    ) -> JSONResponse:
        """Handle storage failures. Never exposes database details."""
        logger.error("Storage failure during %s: %s", exc.operation, exc.reason)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(AppealDomainError)
    async def handle_appeal_domain(
        _request: Request, exc: AppealDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled appeal domain errors."""
        logger.error("Unhandled appeal domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
