"""
Pydantic models for database documents.
"""
from myflix.models.account import Account, AccountRole
from myflix.models.movie import Director, Genre, Movie

__all__ = [
    "Account",
    "AccountRole",
    "Director",
    "Genre",
    "Movie",
]
