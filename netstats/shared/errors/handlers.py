"""
Centralized error handlers for FastAPI.

Maps domain errors to HTTP responses through the failure classifier.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from netstats.domain.hosts.errors import ApiError, ErrorKind
from netstats.shared.errors.classifier import classify, status_for

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def render_error(error: ApiError) -> JSONResponse:
    """Render a classified error as a JSON response.

    Only fixed messages are returned to the client; diagnostics are logged.
    Database failures always render as a generic server error.
    """
    status_code = status_for(error.kind)
    if error.kind is ErrorKind.DATABASE:
        logger.error("Database error: %s", error.detail)
        return _error_response(status_code, "Internal server error")

    logger.warning("%s: %s", error.kind.value, error.detail)
    detail = error.detail if error.exposable else None
    return _error_response(status_code, error.kind.value, detail)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ApiError)
    async def handle_api_error(_request: Request, exc: ApiError) -> JSONResponse:
        """Handle every categorized hosts API error."""
        return render_error(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed requests before any store access."""
        return render_error(classify(exc))

    @app.exception_handler(PyMongoError)
    async def handle_driver_error(_request: Request, exc: PyMongoError) -> JSONResponse:
        """Handle driver errors that escaped an adapter."""
        return render_error(classify(exc))

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return render_error(classify(exc))
