"""
Providers for the database handle and the access service.
"""
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from myflix.database.connections import get_myflix_database
from myflix.services.access_service import AccessService


async def get_myflix_db() -> AsyncIOMotorDatabase:
    """Dependency to get the myFlix database handle."""
    return await get_myflix_database()


async def get_access_service(
    db: AsyncIOMotorDatabase = Depends(get_myflix_db),
) -> AccessService:
    """Dependency to get AccessService instance."""
    return AccessService(db)
