"""Database connection and utilities."""

from .mongodb import connect_to_mongo, get_client, get_database, close_database_connection

__all__ = ["connect_to_mongo", "get_client", "get_database", "close_database_connection"]
