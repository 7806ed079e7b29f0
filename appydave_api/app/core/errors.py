"""
Application error types and their HTTP translation.

Repository and handler code raise the exceptions defined here; the
handlers registered by ``register_error_handlers`` turn them into JSON
responses of the form ``{"detail": <message>}`` so that every error
shares the shape FastAPI already uses for ``HTTPException``.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors that map onto an HTTP status code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


class StorageUnavailable(AppError):
    """The data store cannot be reached or queried."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class ValidationError(AppError):
    """A write was attempted with missing or empty required fields."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class NotFound(AppError):
    """No route or record matches the request."""

    status_code = status.HTTP_404_NOT_FOUND


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers for application errors on ``app``."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        if isinstance(exc, StorageUnavailable):
            logger.error("Storage unavailable on %s %s: %s", request.method, request.url.path, exc.message)
        content: dict = {"detail": exc.message}
        if exc.details is not None:
            content["errors"] = exc.details
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Only GET is routed; a known path with another method is reported
        # as missing rather than as 405.
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Not Found"})
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )
