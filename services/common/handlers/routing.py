"""Route registration for wrapped request handlers."""

import logging
from typing import Any, Dict, Optional, Sequence, Union
from fastapi import APIRouter, FastAPI, Request, status
from fastapi.responses import JSONResponse, Response

from .async_handler import RequestHandler, async_handler

logger = logging.getLogger(__name__)


class ResponseWriter:
    """Mutable response handed to request handlers."""

    def __init__(self, status_code: int = status.HTTP_200_OK):
        self.status_code = status_code
        self.headers: Dict[str, str] = {}
        self.body: Any = None
        self.has_body = False

    def status(self, code: int) -> "ResponseWriter":
        self.status_code = code
        return self

    def set_header(self, name: str, value: str) -> "ResponseWriter":
        self.headers[name] = value
        return self

    def json(self, content: Any) -> "ResponseWriter":
        self.body = content
        self.has_body = True
        return self

    def to_response(self) -> Response:
        """Build the Starlette response for what the handler wrote."""
        if self.has_body:
            return JSONResponse(content=self.body, status_code=self.status_code, headers=self.headers)
        return Response(status_code=self.status_code, headers=self.headers)


def make_endpoint(handler: RequestHandler, status_code: int = status.HTTP_200_OK):
    """
    Turn a ``(request, response, next)`` handler into a FastAPI endpoint.

    Errors forwarded to ``next`` are raised again so FastAPI passes them to
    the registered exception handlers.
    """
    wrapped = async_handler(handler)

    async def endpoint(request: Request) -> Response:
        response = ResponseWriter(status_code)
        forwarded = []

        def next(error: Optional[BaseException] = None) -> None:
            if error is not None and not forwarded:
                forwarded.append(error)

        await wrapped(request, response, next)

        if forwarded:
            raise forwarded[0]
        return response.to_response()

    endpoint.__name__ = getattr(handler, "__name__", "endpoint")
    endpoint.__doc__ = handler.__doc__
    return endpoint


def register_handler(
    router: Union[FastAPI, APIRouter],
    path: str,
    handler: RequestHandler,
    methods: Sequence[str] = ("GET",),
    status_code: int = status.HTTP_200_OK,
    **route_options: Any,
) -> None:
    """
    Register a request handler on an app or router.

    Args:
        router: FastAPI application or APIRouter
        path: Route path
        handler: Handler taking ``(request, response, next)``
        methods: HTTP methods served by the route
        status_code: Default status code of successful responses
        route_options: Extra keyword arguments for ``add_api_route``
    """
    endpoint = make_endpoint(handler, status_code=status_code)
    router.add_api_route(
        path,
        endpoint,
        methods=list(methods),
        response_model=None,
        **route_options
    )
    logger.debug(f"Registered {', '.join(methods)} {path} -> {endpoint.__name__}")
