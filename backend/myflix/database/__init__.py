"""
Database module - MongoDB connection, database definitions and seeding.
"""
from myflix.database.connections import (
    close_connections,
    get_database,
    get_mongo_client,
    get_myflix_database,
    ping,
)
from myflix.database.databases import myflix_db

__all__ = [
    "close_connections",
    "get_database",
    "get_mongo_client",
    "get_myflix_database",
    "ping",
    "myflix_db",
]
