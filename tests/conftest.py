"""
Global test fixtures for myFlix.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Fast password hasher and token service
- Sample movie and user data
"""

import asyncio
import os
import sys
from pathlib import Path
from typing import Generator
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

# Test settings must be in place before myflix.config is first imported
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("ACCESS_LOG_FILE", "")
os.environ.setdefault("STATIC_DIR", str(Path(__file__).parent.parent / "public"))


# =============================================================================
# Sample Data
# =============================================================================

SAMPLE_MOVIES = [
    {
        "_id": "m1",
        "title": "Inception",
        "description": "Dream heist.",
        "genre": {"name": "Science Fiction", "description": "Imagined science."},
        "director": {
            "name": "Christopher Nolan",
            "bio": "British-American filmmaker.",
            "birth_year": 1970,
            "death_year": None,
        },
        "image_path": "inception.png",
        "featured": True,
    },
    {
        "_id": "m2",
        "title": "The Dark Knight",
        "description": "Batman against the Joker.",
        "genre": {"name": "Action", "description": "Chases and fights."},
        "director": {
            "name": "Christopher Nolan",
            "bio": "British-American filmmaker.",
            "birth_year": 1970,
            "death_year": None,
        },
        "image_path": "dark_knight.png",
        "featured": False,
    },
    {
        "_id": "m3",
        "title": "Psycho",
        "description": "A motel with a secret.",
        "genre": {"name": "Thriller", "description": "Suspense."},
        "director": {
            "name": "Alfred Hitchcock",
            "bio": "Master of Suspense.",
            "birth_year": 1899,
            "death_year": 1980,
        },
        "image_path": "psycho.png",
        "featured": True,
    },
]


@pytest.fixture
def sample_movies() -> list[dict]:
    """Copies of the sample movie documents."""
    return [dict(m) for m in SAMPLE_MOVIES]


@pytest.fixture
def test_user_data() -> dict:
    """Basic test user data for registration."""
    return {
        "username": "alice1",
        "password": "secret",
        "email": "a@x.com",
    }


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_myflix_db(mock_async_mongo_client):
    """Provide a mock myFlix database with the app's indexes."""
    from myflix.database.databases import myflix_db
    from myflix.database.registry import create_indexes

    db = mock_async_mongo_client[myflix_db.db_name()]
    await create_indexes(db)
    yield db


@pytest_asyncio.fixture
async def seeded_db(mock_myflix_db, sample_movies):
    """Mock database with the sample movies loaded."""
    await mock_myflix_db.movies.insert_many(sample_movies)
    yield mock_myflix_db


# =============================================================================
# Security Fixtures
# =============================================================================

@pytest.fixture
def hasher():
    """bcrypt hasher with minimum rounds to keep tests fast."""
    from passlib.context import CryptContext
    from myflix.core.security import PasswordHasher

    return PasswordHasher(CryptContext(schemes=["bcrypt"], bcrypt__rounds=4))


@pytest.fixture
def token_service():
    """Token service using the test settings."""
    from myflix.core.security import TokenService
    return TokenService()


@pytest_asyncio.fixture
async def access_service(seeded_db, hasher, token_service):
    """AccessService wired to the seeded mock database."""
    from myflix.services.access_service import AccessService
    return AccessService(seeded_db, hasher=hasher, tokens=token_service)


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def api_mongo_client(sample_movies):
    """
    Mock MongoDB client for API tests, prepared without a running event loop.
    """
    from mongomock_motor import AsyncMongoMockClient
    from myflix.database.databases import myflix_db
    from myflix.database.registry import create_indexes

    client = AsyncMongoMockClient()
    db = client[myflix_db.db_name()]

    async def _prepare():
        await create_indexes(db)
        await db.movies.insert_many(sample_movies)

    asyncio.run(_prepare())
    yield client
    client.close()


@pytest.fixture
def app(api_mongo_client, hasher):
    """
    FastAPI app with the database dependencies pointed at the mock client.
    """
    from myflix.database.databases import myflix_db
    from myflix.dependencies.services import get_access_service, get_myflix_db
    from myflix.main import app
    from myflix.services.access_service import AccessService

    db = api_mongo_client[myflix_db.db_name()]

    async def _db():
        return db

    async def _service():
        return AccessService(db, hasher=hasher)

    app.dependency_overrides[get_myflix_db] = _db
    app.dependency_overrides[get_access_service] = _service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app, api_mongo_client) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    The lifespan talks to the mock client instead of a real server.
    """
    with patch("myflix.main.get_mongo_client", AsyncMock(return_value=api_mongo_client)), \
         patch("myflix.main.close_connections", AsyncMock()):
        with TestClient(app) as c:
            yield c


# =============================================================================
# Authenticated Client Helpers
# =============================================================================

@pytest.fixture
def auth_headers():
    """Build the Authorization header for a bearer token."""
    def _headers(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}
    return _headers


@pytest.fixture
def login_as(client, auth_headers):
    """
    Register an account through the API (if needed) and return its auth headers.

    Usage:
        def test_something(client, login_as):
            headers = login_as("alice1")
            client.get("/movies", headers=headers)
    """
    def _login(username: str, password: str = "secret") -> dict:
        client.post(
            "/users",
            json={"username": username, "password": password, "email": f"{username}@myflix.io"},
        )
        response = client.post("/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return auth_headers(response.json()["access_token"])
    return _login
