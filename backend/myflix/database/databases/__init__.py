"""
Database definitions and collection constants.
"""
from myflix.database.databases import myflix_db

__all__ = ["myflix_db"]
