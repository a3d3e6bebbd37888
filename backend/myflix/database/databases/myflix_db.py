"""
myFlix database configuration.
Stores the movie catalog and user accounts.
"""
from myflix.config import get_settings


def db_name() -> str:
    """Configured database name (``MONGO_DB_NAME``)."""
    return get_settings().mongo_db_name


class Collections:
    """Collection names in the myFlix database."""
    MOVIES = "movies"
    USERS = "users"
    METADATA = "_metadata"

    # Index definitions for each collection
    INDEXES = {
        "users": [
            {"keys": [("username", 1)], "unique": True},
        ],
        "movies": [
            {"keys": [("title", 1)]},
            {"keys": [("genre.name", 1)]},
            {"keys": [("director.name", 1)]},
            {"keys": [("featured", 1)]},
        ],
    }


def manifest() -> dict:
    """Manifest for the registry."""
    return {
        "db_name": db_name(),
        "purpose": "Movie catalog and user accounts",
        "collections": [Collections.MOVIES, Collections.USERS, Collections.METADATA],
        "access_level": "standard",
    }
