"""Database bootstrap run once at startup."""

import logging
import os

from common.database.mongodb import connect_to_mongo
from .config import settings
from .constants import DB_NAME

logger = logging.getLogger(__name__)


def build_mongodb_uri() -> str:
    """Join the configured base URL with the application database name."""
    return f"{settings.mongodb_url.rstrip('/')}/{DB_NAME}"


def terminate(status: int) -> None:
    """
    Flush log output and end the process with ``status``.

    Runs inside the ASGI lifespan, where a SystemExit would be turned into
    a startup failure with the server's own exit code.
    """
    for handler in logging.getLogger().handlers:
        handler.flush()
    os._exit(status)


async def connect() -> None:
    """
    Connect to MongoDB before the application starts serving.

    A failed connection is fatal: the error is logged and the process
    exits with status 1.
    """
    try:
        host = await connect_to_mongo(
            mongo_uri=build_mongodb_uri(),
            database_name=DB_NAME,
            server_selection_timeout_ms=settings.mongodb_connect_timeout_ms
        )
    except Exception as e:
        logger.error(f"MongoDB connection error: {e}", exc_info=True)
        terminate(1)
        return

    logger.info(f"MongoDB connected! DB host: {host}")
