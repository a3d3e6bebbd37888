"""
Stores wrapping the MongoDB collections.
"""
from myflix.stores.accounts import AccountStore
from myflix.stores.catalog import CatalogStore

__all__ = ["AccountStore", "CatalogStore"]
