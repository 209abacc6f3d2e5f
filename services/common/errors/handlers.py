"""Centralized error handling for request handlers."""

import logging
from typing import List, Optional
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .models import ErrorResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Error raised by request handlers to produce an HTTP error response."""

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        message: str = "Something went wrong",
        errors: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code or status.HTTP_500_INTERNAL_SERVER_ERROR
        self.message = message
        self.errors = list(errors or [])


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """
    Render an ApiError forwarded by a request handler.

    Args:
        request: The request being processed
        exc: The forwarded error

    Returns:
        JSONResponse: Error body with the error's status code
    """
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc.message}")

    body = ErrorResponse(message=exc.message, errors=exc.errors)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render any other exception as an internal server error."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    body = ErrorResponse(message="Internal server error")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump()
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the centralized error handlers on a FastAPI application."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
