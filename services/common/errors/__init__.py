"""Error types and centralized error handlers."""

from .handlers import ApiError, api_error_handler, unhandled_error_handler, register_error_handlers
from .models import ErrorResponse

__all__ = [
    "ApiError",
    "ErrorResponse",
    "api_error_handler",
    "unhandled_error_handler",
    "register_error_handlers",
]
