"""
API Routers module.
"""
from myflix.routers import auth, health, movies, users

__all__ = ["auth", "health", "movies", "users"]
