"""
MongoDB client lifecycle.

One Motor client is shared by the whole process. It is created on first use
and closed by the application lifespan (or the seeding command).
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from myflix.config import get_settings

logger = logging.getLogger(__name__)

_mongo_client: Optional[AsyncIOMotorClient] = None


async def get_mongo_client() -> AsyncIOMotorClient:
    """Return the shared client, connecting lazily."""
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = AsyncIOMotorClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
            appname="myflix",
        )
        logger.info("MongoDB client created")
    return _mongo_client


async def close_connections():
    """Close and forget the shared client."""
    global _mongo_client

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None


async def get_database(db_name: str) -> AsyncIOMotorDatabase:
    client = await get_mongo_client()
    return client[db_name]


async def get_myflix_database() -> AsyncIOMotorDatabase:
    """The database holding the movies and users collections."""
    return await get_database(get_settings().mongo_db_name)


async def ping(client: AsyncIOMotorClient) -> float:
    """
    Round-trip a ping to the server.

    Returns:
        The server's ``ok`` value (1.0 when reachable)

    Raises:
        pymongo.errors.PyMongoError: If the server cannot be reached
    """
    reply = await client.admin.command("ping")
    return float(reply.get("ok", 0))
