"""
Catalog seeding.

The API never writes movies, so the catalog is loaded from a JSON file:

    python -m myflix.database.seed data/movies.json
"""
import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from motor.motor_asyncio import AsyncIOMotorDatabase

from myflix.config import get_settings
from myflix.core.logging_config import setup_logging
from myflix.database.connections import close_connections, get_myflix_database
from myflix.database.databases import myflix_db
from myflix.database.registry import create_indexes
from myflix.models.movie import Movie

logger = logging.getLogger(__name__)


def load_movies(path: Path) -> list[dict[str, Any]]:
    """Read and validate a JSON array of movie documents."""
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"{path} must contain a JSON array of movies")

    movies = []
    for item in raw:
        Movie(**item)
        movies.append(item)
    return movies


async def seed_movies(db: AsyncIOMotorDatabase, movies: list[dict[str, Any]]) -> int:
    """
    Upsert movies by title.

    Returns:
        Number of movies inserted (existing titles are updated in place)
    """
    collection = db[myflix_db.Collections.MOVIES]
    inserted = 0
    for movie in movies:
        doc = dict(movie)
        movie_id = doc.pop("_id", None)
        update: dict[str, Any] = {"$set": doc}
        if movie_id is not None:
            update["$setOnInsert"] = {"_id": movie_id}
        result = await collection.update_one({"title": doc["title"]}, update, upsert=True)
        if result.upserted_id is not None:
            inserted += 1
    logger.info("Seeded %d movies (%d new)", len(movies), inserted)
    return inserted


async def _run(path: Path) -> None:
    db = await get_myflix_database()
    try:
        await create_indexes(db)
        await seed_movies(db, load_movies(path))
    finally:
        await close_connections()


def main() -> None:
    parser = argparse.ArgumentParser(description="Load movies into the myFlix catalog")
    parser.add_argument("path", type=Path, help="JSON file with an array of movies")
    args = parser.parse_args()

    settings = get_settings()
    setup_logging(settings.log_level)
    asyncio.run(_run(args.path))


if __name__ == "__main__":
    main()
