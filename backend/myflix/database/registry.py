"""
Database registry management.
Records the database manifest and ensures indexes exist on startup.
"""
import logging
from datetime import datetime, timezone

from motor.motor_asyncio import AsyncIOMotorDatabase

from myflix.database.databases import myflix_db

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"


async def sync_registry(db: AsyncIOMotorDatabase) -> None:
    """
    Upsert the manifest into the database's _metadata collection.
    """
    manifest = myflix_db.manifest()
    now = datetime.now(timezone.utc)

    await db[myflix_db.Collections.METADATA].update_one(
        {"_id": "db_metadata"},
        {
            "$set": {
                "db_name": manifest["db_name"],
                "purpose": manifest["purpose"],
                "collections": manifest["collections"],
                "access_level": manifest["access_level"],
                "schema_version": SCHEMA_VERSION,
                "last_updated_at": now,
            },
            "$setOnInsert": {
                "created_at": now,
            },
        },
        upsert=True,
    )


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create the indexes declared in Collections.INDEXES."""
    for collection_name, indexes in myflix_db.Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            await collection.create_index(keys, **kwargs)
            logger.debug("Ensured index %s on %s", keys, collection_name)
