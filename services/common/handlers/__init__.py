"""Request handler utilities."""

from .async_handler import async_handler
from .routing import ResponseWriter, make_endpoint, register_handler

__all__ = ["async_handler", "ResponseWriter", "make_endpoint", "register_handler"]
