"""
Tests for the MongoDB stores (myflix.stores).

These tests cover:
- CatalogStore lookups (id, title, genre, director)
- AccountStore CRUD and unique usernames
- Atomic favorites set operations
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId

from myflix.core.exceptions import ConflictError
from myflix.stores.accounts import AccountStore
from myflix.stores.catalog import CatalogStore


# =============================================================================
# CatalogStore Tests
# =============================================================================

class TestCatalogStore:
    """Tests for read-only catalog queries."""

    @pytest.mark.asyncio
    async def test_list_all_returns_every_movie(self, seeded_db):
        movies = await CatalogStore(seeded_db).list_all()

        assert {m.title for m in movies} == {"Inception", "The Dark Knight", "Psycho"}

    @pytest.mark.asyncio
    async def test_list_all_on_empty_catalog_is_empty(self, mock_myflix_db):
        assert await CatalogStore(mock_myflix_db).list_all() == []

    @pytest.mark.asyncio
    async def test_find_by_string_id(self, seeded_db):
        movie = await CatalogStore(seeded_db).find_by_id("m1")

        assert movie is not None
        assert movie.id == "m1"
        assert movie.title == "Inception"

    @pytest.mark.asyncio
    async def test_find_by_object_id(self, mock_myflix_db, sample_movies):
        doc = dict(sample_movies[0])
        doc["_id"] = ObjectId()
        await mock_myflix_db.movies.insert_one(doc)

        store = CatalogStore(mock_myflix_db)

        assert (await store.find_by_id(str(doc["_id"]))).title == "Inception"
        assert await store.exists(str(doc["_id"])) is True

    @pytest.mark.asyncio
    async def test_exists_is_false_for_unknown_id(self, seeded_db):
        assert await CatalogStore(seeded_db).exists("nope") is False

    @pytest.mark.asyncio
    async def test_genre_and_director_queries_match_nested_fields(self, seeded_db):
        store = CatalogStore(seeded_db)

        nolan = await store.list_by_director("Christopher Nolan")
        thrillers = await store.list_by_genre("Thriller")

        assert {m.id for m in nolan} == {"m1", "m2"}
        assert [m.id for m in thrillers] == ["m3"]
        assert (await store.find_first_by_genre("Action")).genre.description == "Chases and fights."

    @pytest.mark.asyncio
    async def test_list_featured(self, seeded_db):
        featured = await CatalogStore(seeded_db).list_featured()

        assert {m.id for m in featured} == {"m1", "m3"}


# =============================================================================
# AccountStore Tests
# =============================================================================

class TestAccountStore:
    """Tests for account persistence."""

    @pytest.mark.asyncio
    async def test_create_starts_with_empty_favorites(self, mock_myflix_db):
        account = await AccountStore(mock_myflix_db).create("alice1", "hash", "a@x.com")

        assert account.id is not None
        assert account.favorite_movies == []
        assert account.roles == ["user"]

    @pytest.mark.asyncio
    async def test_duplicate_username_raises_conflict(self, mock_myflix_db):
        """The unique index turns a duplicate insert into ConflictError."""
        store = AccountStore(mock_myflix_db)
        await store.create("alice1", "hash", "a@x.com")

        with pytest.raises(ConflictError):
            await store.create("alice1", "hash2", "other@x.com")

        assert await mock_myflix_db.users.count_documents({"username": "alice1"}) == 1

    @pytest.mark.asyncio
    async def test_replace_fields_returns_updated_account(self, mock_myflix_db):
        store = AccountStore(mock_myflix_db)
        account = await store.create("alice1", "hash", "a@x.com")

        updated = await store.replace_fields(account.id, {"email": "new@x.com"})

        assert updated.email == "new@x.com"
        assert updated.username == "alice1"

    @pytest.mark.asyncio
    async def test_replace_fields_on_missing_account_returns_none(self, mock_myflix_db):
        assert await AccountStore(mock_myflix_db).replace_fields(str(ObjectId()), {"email": "x@y.z"}) is None

    @pytest.mark.asyncio
    async def test_delete_by_id(self, mock_myflix_db):
        store = AccountStore(mock_myflix_db)
        account = await store.create("alice1", "hash", "a@x.com")

        deleted = await store.delete_by_id(account.id)

        assert deleted.username == "alice1"
        assert await store.find_by_username("alice1") is None
        assert await store.delete_by_id(account.id) is None


class TestFavoritesSetOperations:
    """Tests for $addToSet / $pull favorites mutation."""

    @pytest.mark.asyncio
    async def test_add_is_idempotent(self, mock_myflix_db):
        store = AccountStore(mock_myflix_db)
        account = await store.create("alice1", "hash", "a@x.com")

        await store.add_favorite(account.id, "m1")
        updated = await store.add_favorite(account.id, "m1")

        assert updated.favorite_movies == ["m1"]

    @pytest.mark.asyncio
    async def test_remove_absent_id_is_noop(self, mock_myflix_db):
        store = AccountStore(mock_myflix_db)
        account = await store.create("alice1", "hash", "a@x.com")
        await store.add_favorite(account.id, "m1")

        updated = await store.remove_favorite(account.id, "m2")

        assert updated.favorite_movies == ["m1"]

    @pytest.mark.asyncio
    async def test_mutations_on_missing_account_return_none(self, mock_myflix_db):
        store = AccountStore(mock_myflix_db)
        missing = str(ObjectId())

        assert await store.add_favorite(missing, "m1") is None
        assert await store.remove_favorite(missing, "m1") is None

    @pytest.mark.asyncio
    async def test_concurrent_add_and_remove_end_in_a_consistent_state(self, mock_myflix_db):
        """Concurrent add/remove of the same id never corrupts the set."""
        store = AccountStore(mock_myflix_db)
        account = await store.create("alice1", "hash", "a@x.com")

        await asyncio.gather(
            *[store.add_favorite(account.id, "m1") for _ in range(5)],
            *[store.remove_favorite(account.id, "m1") for _ in range(5)],
        )

        final = await store.find_by_id(account.id)
        assert final.favorite_movies in ([], ["m1"])

    @pytest.mark.asyncio
    async def test_concurrent_adds_of_distinct_ids_are_all_kept(self, mock_myflix_db):
        """No lost updates: every concurrent add survives."""
        store = AccountStore(mock_myflix_db)
        account = await store.create("alice1", "hash", "a@x.com")
        ids = [f"m{i}" for i in range(10)]

        await asyncio.gather(*[store.add_favorite(account.id, movie_id) for movie_id in ids])

        final = await store.find_by_id(account.id)
        assert sorted(final.favorite_movies) == sorted(ids)


# =============================================================================
# Full listings
# =============================================================================

class TestFullListings:
    """List queries return the whole collection, never a capped page."""

    @staticmethod
    def _db_with_cursor(docs):
        cursor = MagicMock()
        cursor.to_list = AsyncMock(return_value=docs)
        collection = MagicMock()
        collection.find.return_value = cursor
        db = MagicMock()
        db.__getitem__.return_value = collection
        return db, cursor

    @pytest.mark.asyncio
    async def test_catalog_listing_is_uncapped(self, sample_movies):
        db, cursor = self._db_with_cursor(sample_movies)

        movies = await CatalogStore(db).list_all()

        assert len(movies) == 3
        cursor.to_list.assert_awaited_once_with(length=None)

    @pytest.mark.asyncio
    async def test_account_listing_is_uncapped(self):
        db, cursor = self._db_with_cursor([])

        assert await AccountStore(db).list_all() == []
        cursor.to_list.assert_awaited_once_with(length=None)
