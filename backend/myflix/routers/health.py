"""
Liveness and readiness probes.
"""
import logging

from fastapi import APIRouter, status

from myflix.database.connections import get_mongo_client, ping
from myflix.database.databases import myflix_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health", status_code=status.HTTP_200_OK, summary="Liveness probe")
async def health_check():
    """Answers as long as the process is serving requests."""
    return {"status": "healthy"}


@router.get("/health/ready", status_code=status.HTTP_200_OK, summary="Readiness probe")
async def readiness_check():
    """
    Check MongoDB and the catalog.

    An unreachable database or an unseeded catalog makes the service
    ``degraded``; the probe itself always answers 200.
    """
    checks = {"api": "healthy", "mongodb": "unknown", "catalog": "unknown"}
    movies = None

    try:
        client = await get_mongo_client()
        await ping(client)
        checks["mongodb"] = "healthy"

        db = client[myflix_db.db_name()]
        movies = await db[myflix_db.Collections.MOVIES].count_documents({})
        checks["catalog"] = "healthy" if movies else "empty"
    except Exception as e:
        logger.warning("Readiness check failed: %s", e)
        if checks["mongodb"] == "unknown":
            checks["mongodb"] = f"unhealthy: {e}"
        else:
            checks["catalog"] = f"unhealthy: {e}"

    return {
        "status": "healthy" if all(v == "healthy" for v in checks.values()) else "degraded",
        "checks": checks,
        "movies": movies,
    }
