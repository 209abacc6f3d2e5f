"""Health check implementations."""

import logging
from typing import Dict
from fastapi import status
from fastapi.responses import JSONResponse
from ..database.mongodb import get_client, get_database

logger = logging.getLogger(__name__)


async def health_check(service_name: str = "unknown", version: str = "") -> JSONResponse:
    """
    Basic health check endpoint.

    Args:
        service_name: Name of the service
        version: Version of the service

    Returns:
        JSONResponse: Health status
    """
    content = {"status": "healthy", "service": service_name}
    if version:
        content["version"] = version
    return JSONResponse(status_code=status.HTTP_200_OK, content=content)


async def _check_mongodb() -> Dict[str, str]:
    try:
        database = get_database()
        await get_client().admin.command('ping')
    except Exception as e:
        logger.error(f"MongoDB readiness check failed: {e}")
        return {"status": "not ready"}
    return {"status": "ready", "database": database.name}


async def readiness_check() -> JSONResponse:
    """
    Readiness check - the service only takes traffic once the
    database connection made at startup answers a ping.

    Returns:
        JSONResponse: Readiness status, 503 when not ready
    """
    checks = {"mongodb": await _check_mongodb()}
    all_ready = all(check["status"] == "ready" for check in checks.values())

    return JSONResponse(
        status_code=status.HTTP_200_OK if all_ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "ready" if all_ready else "not ready",
            "checks": checks
        }
    )


async def liveness_check() -> JSONResponse:
    """Liveness check - the process is up and serving."""
    return JSONResponse(status_code=status.HTTP_200_OK, content={"status": "alive"})
