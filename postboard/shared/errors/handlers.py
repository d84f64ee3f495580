"""
Centralized error handlers for FastAPI.

Maps domain and authentication errors to HTTP responses.
No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from postboard.domain.errors import (
    AuthenticationError,
    BadParamsError,
    DocumentNotFoundError,
    DomainError,
    OwnershipError,
    UserValidationError,
)

logger = logging.getLogger(__name__)

HTTP_401 = 401
HTTP_403 = 403
HTTP_404 = 404
HTTP_422 = 422
HTTP_500 = 500

DOMAIN_ERROR_STATUS: dict[type[DomainError], int] = {
    OwnershipError: HTTP_403,
    UserValidationError: HTTP_401,
    DocumentNotFoundError: HTTP_404,
    BadParamsError: HTTP_422,
}


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def status_for(exc: Exception) -> int:
    """Return the HTTP status for any raised error. Unknown errors map to 500."""
    if isinstance(exc, AuthenticationError):
        return HTTP_401
    for error_type, status_code in DOMAIN_ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return status_code
    return HTTP_500


def error_response_for(exc: Exception) -> JSONResponse:
    """Translate any raised error into its JSON error response."""
    status_code = status_for(exc)
    if status_code == HTTP_500:
        return _error_response(HTTP_500, "Internal server error")
    return _error_response(status_code, exc.name, exc.message)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(DomainError)
    async def handle_domain(_request: Request, exc: DomainError) -> JSONResponse:
        """Handle the closed set of domain errors."""
        logger.warning("%s: %s", exc.name, exc.message)
        return error_response_for(exc)

    @app.exception_handler(AuthenticationError)
    async def handle_authentication(
        _request: Request, exc: AuthenticationError
    ) -> JSONResponse:
        """Handle missing or invalid credentials."""
        logger.warning("Authentication failed: %s", exc.name)
        return error_response_for(exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response_for(exc)
