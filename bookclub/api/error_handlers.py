"""Error Handlers — global exception handlers for the Book Club API.

Invariants:
    - BookClubError → {"error": <message>} with the error's http_status
    - RequestValidationError → 400 {"error": "<field>: <reason>; ..."}
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (BookClubError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the app module import fan-out small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookclub.core.errors import BookClubError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Book Club domain/infrastructure error handler."""

    @app.exception_handler(BookClubError)
    async def bookclub_error_handler(request: Request, exc: BookClubError):
        """Handle all Book Club domain/infrastructure errors."""
        log = logger.error if exc.severity == ErrorSeverity.CRITICAL else logger.warning
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
            content=build_validation_error_response(exc),
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
            content={"error": "An unexpected error occurred"},
        )


def build_validation_error_response(exc: RequestValidationError) -> dict:
    """Flatten pydantic errors into a single message."""
    messages = []
    for e in exc.errors():
        # drop the "body"/"query"/"path" location prefix
        loc = [str(part) for part in e["loc"][1:]] or [str(e["loc"][0])]
        messages.append(f"{'.'.join(loc)}: {e['msg']}")
    return {"error": "; ".join(messages) or "Invalid request data"}
