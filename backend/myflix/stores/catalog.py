"""
Catalog store: lookup-only access to the movies collection.
"""
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from myflix.database.databases import myflix_db
from myflix.models.movie import Movie
from myflix.stores._ids import id_filter


class CatalogStore:
    """Read-only queries over movies."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.movies = db[myflix_db.Collections.MOVIES]

    async def _find_many(self, query: dict) -> list[Movie]:
        cursor = self.movies.find(query)
        docs = await cursor.to_list(length=None)
        return [Movie.from_document(doc) for doc in docs]

    async def list_all(self) -> list[Movie]:
        return await self._find_many({})

    async def list_featured(self) -> list[Movie]:
        return await self._find_many({"featured": True})

    async def find_by_id(self, movie_id: str) -> Optional[Movie]:
        doc = await self.movies.find_one(id_filter(movie_id))
        return Movie.from_document(doc) if doc else None

    async def exists(self, movie_id: str) -> bool:
        """True if a movie with this id is currently in the catalog."""
        doc = await self.movies.find_one(id_filter(movie_id), {"_id": 1})
        return doc is not None

    async def find_by_title(self, title: str) -> Optional[Movie]:
        doc = await self.movies.find_one({"title": title})
        return Movie.from_document(doc) if doc else None

    async def list_by_genre(self, genre_name: str) -> list[Movie]:
        return await self._find_many({"genre.name": genre_name})

    async def list_by_director(self, director_name: str) -> list[Movie]:
        return await self._find_many({"director.name": director_name})

    async def find_first_by_genre(self, genre_name: str) -> Optional[Movie]:
        doc = await self.movies.find_one({"genre.name": genre_name})
        return Movie.from_document(doc) if doc else None

    async def find_first_by_director(self, director_name: str) -> Optional[Movie]:
        doc = await self.movies.find_one({"director.name": director_name})
        return Movie.from_document(doc) if doc else None
