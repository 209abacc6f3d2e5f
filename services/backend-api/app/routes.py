"""API routes registered through the error forwarding wrapper."""

from fastapi import APIRouter, status

from common.database.mongodb import get_database
from common.errors import ApiError
from common.handlers import register_handler
from .config import settings

router = APIRouter(prefix="/api/v1", tags=["Status"])


async def get_status(request, response, next):
    """Report the service and the database it is bound to."""
    try:
        database = get_database()
    except RuntimeError as e:
        raise ApiError(status.HTTP_503_SERVICE_UNAVAILABLE, "Database is not available", [str(e)])

    await database.command('ping')
    response.status(status.HTTP_200_OK).json({
        "success": True,
        "service": settings.app_name,
        "database": database.name
    })


register_handler(router, "/status", get_status, methods=["GET"])
