"""
Dependencies for dependency injection in routes.
"""
from myflix.dependencies.auth import CurrentAccount, get_current_account
from myflix.dependencies.services import get_access_service, get_myflix_db

__all__ = [
    "CurrentAccount",
    "get_current_account",
    "get_access_service",
    "get_myflix_db",
]
