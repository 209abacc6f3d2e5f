"""Error forwarding wrapper for asynchronous request handlers."""

import functools
import inspect
import logging
from typing import Any, Awaitable, Callable

logger = logging.getLogger(__name__)

NextFunction = Callable[..., Any]
RequestHandler = Callable[[Any, Any, NextFunction], Any]


def async_handler(request_handler: RequestHandler) -> Callable[[Any, Any, NextFunction], Awaitable[None]]:
    """
    Wrap a request handler so its failures are forwarded to ``next``.

    The handler is called with ``(request, response, next)``. Its result is
    awaited when it is awaitable, so both coroutine functions and plain
    functions can be wrapped. Any exception raised while running the handler
    is passed to ``next(error)`` exactly once instead of propagating.

    Args:
        request_handler: Handler taking ``(request, response, next)``

    Returns:
        Callable: Coroutine function with the same signature
    """
    @functools.wraps(request_handler)
    async def wrapper(request, response, next):
        try:
            result = request_handler(request, response, next)
            if inspect.isawaitable(result):
                await result
        except Exception as err:
            logger.debug(f"Forwarding error from {getattr(request_handler, '__name__', request_handler)}: {err!r}")
            forwarded = next(err)
            if inspect.isawaitable(forwarded):
                await forwarded

    return wrapper
