"""
Account store: CRUD on the users collection plus atomic favorites mutation.

Every mutation is a single MongoDB document operation, so concurrent
requests against the same account serialize in the database.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from myflix.core.exceptions import ConflictError
from myflix.database.databases import myflix_db
from myflix.models.account import Account, AccountRole
from myflix.stores._ids import id_filter

logger = logging.getLogger(__name__)


class AccountStore:
    """Persistence operations for accounts."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.users = db[myflix_db.Collections.USERS]

    async def list_all(self) -> list[Account]:
        cursor = self.users.find({})
        docs = await cursor.to_list(length=None)
        return [Account.from_document(doc) for doc in docs]

    async def find_by_id(self, account_id: str) -> Optional[Account]:
        doc = await self.users.find_one(id_filter(account_id))
        return Account.from_document(doc) if doc else None

    async def find_by_username(self, username: str) -> Optional[Account]:
        doc = await self.users.find_one({"username": username})
        return Account.from_document(doc) if doc else None

    async def create(
        self,
        username: str,
        hashed_password: str,
        email: str,
        birthday: Optional[str] = None,
        roles: Optional[list[str]] = None,
    ) -> Account:
        """
        Insert a new account with an empty favorites set.

        Raises:
            ConflictError: If the username is already taken (unique index)
        """
        user_doc = {
            "username": username,
            "hashed_password": hashed_password,
            "email": email,
            "birthday": birthday,
            "favorite_movies": [],
            "roles": roles or [AccountRole.USER.value],
            "created_at": datetime.now(timezone.utc),
        }

        try:
            result = await self.users.insert_one(user_doc)
        except DuplicateKeyError:
            logger.debug("Duplicate username on insert: %s", username)
            raise ConflictError(f"{username} already exists")

        user_doc["_id"] = result.inserted_id
        return Account.from_document(user_doc)

    async def replace_fields(self, account_id: str, fields: dict[str, Any]) -> Optional[Account]:
        """
        Overwrite the given fields in one operation.

        Returns:
            The updated account, or None if it no longer exists

        Raises:
            ConflictError: If a new username collides with another account
        """
        try:
            doc = await self.users.find_one_and_update(
                id_filter(account_id),
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            raise ConflictError(f"{fields.get('username')} already exists")

        return Account.from_document(doc) if doc else None

    async def delete_by_id(self, account_id: str) -> Optional[Account]:
        """Delete an account; returns the removed account or None."""
        doc = await self.users.find_one_and_delete(id_filter(account_id))
        return Account.from_document(doc) if doc else None

    async def add_favorite(self, account_id: str, movie_id: str) -> Optional[Account]:
        """Set-union insert of a movie id; idempotent."""
        doc = await self.users.find_one_and_update(
            id_filter(account_id),
            {"$addToSet": {"favorite_movies": movie_id}},
            return_document=ReturnDocument.AFTER,
        )
        return Account.from_document(doc) if doc else None

    async def remove_favorite(self, account_id: str, movie_id: str) -> Optional[Account]:
        """Set-difference removal of a movie id; removing an absent id is a no-op."""
        doc = await self.users.find_one_and_update(
            id_filter(account_id),
            {"$pull": {"favorite_movies": movie_id}},
            return_document=ReturnDocument.AFTER,
        )
        return Account.from_document(doc) if doc else None
