"""Application constants."""

DB_NAME = "backend"
