"""MongoDB connection handling."""

import logging
from typing import Optional
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import InvalidOperation

logger = logging.getLogger(__name__)

_client: Optional[AsyncIOMotorClient] = None
_database: Optional[AsyncIOMotorDatabase] = None


def _resolve_host(client: AsyncIOMotorClient) -> str:
    try:
        return client.address[0]
    except InvalidOperation:
        # Load balancing among several mongos has no single address
        return ",".join(sorted(host for host, _ in client.nodes))


async def connect_to_mongo(
    mongo_uri: str,
    database_name: str,
    server_selection_timeout_ms: Optional[int] = None,
) -> str:
    """
    Connect to MongoDB.

    Only one connection is kept per process. Calling this again while
    connected leaves the existing connection in place.

    Args:
        mongo_uri: MongoDB connection URI
        database_name: Name of the database to use
        server_selection_timeout_ms: Upper bound for the initial server selection

    Returns:
        str: Host of the established connection

    Raises:
        Exception: Whatever the driver raises when the server cannot be reached
    """
    global _client, _database

    if _client is not None:
        logger.warning("MongoDB connection already established, keeping it")
        return _resolve_host(_client)

    logger.info(f"Connecting to MongoDB database: {database_name}")
    options = {}
    if server_selection_timeout_ms is not None:
        options["serverSelectionTimeoutMS"] = server_selection_timeout_ms

    client = AsyncIOMotorClient(mongo_uri, **options)
    try:
        # Test connection
        await client.admin.command('ping')
        host = _resolve_host(client)
    except Exception:
        client.close()
        raise

    _client = client
    _database = client[database_name]
    logger.debug(f"Successfully connected to MongoDB database: {database_name}")
    return host


async def close_database_connection() -> None:
    """Close MongoDB connection."""
    global _client, _database

    if _client:
        logger.info("Closing MongoDB connection")
        _client.close()
        _client = None
        _database = None


def get_client() -> AsyncIOMotorClient:
    """
    Get the MongoDB client instance.

    Raises:
        RuntimeError: If database is not connected
    """
    if _client is None:
        raise RuntimeError("Database is not connected. Call connect_to_mongo first.")
    return _client


def get_database() -> AsyncIOMotorDatabase:
    """
    Get the MongoDB database instance.

    Returns:
        AsyncIOMotorDatabase: The database instance

    Raises:
        RuntimeError: If database is not connected
    """
    if _database is None:
        raise RuntimeError("Database is not connected. Call connect_to_mongo first.")
    return _database
