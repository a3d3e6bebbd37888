"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with ready-made accounts for
service-level tests and response assertion helpers for route tests.
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Account Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def alice(access_service, test_user_data):
    """A registered regular account, as loaded from the store."""
    from myflix.schemas.account import AccountInput

    await access_service.register(AccountInput(**test_user_data))
    return await access_service.accounts.find_by_username(test_user_data["username"])


@pytest_asyncio.fixture
async def bob(access_service):
    """A second regular account."""
    from myflix.schemas.account import AccountInput

    await access_service.register(
        AccountInput(username="bobby2", password="hunter2", email="bob@myflix.io")
    )
    return await access_service.accounts.find_by_username("bobby2")


@pytest_asyncio.fixture
async def admin(access_service, hasher):
    """An account holding the admin role."""
    from myflix.models.account import AccountRole

    return await access_service.accounts.create(
        username="admin01",
        hashed_password=hasher.hash("adminpass"),
        email="admin@myflix.io",
        roles=[AccountRole.USER.value, AccountRole.ADMIN.value],
    )


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, detail_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "detail" in data
        if detail_contains:
            assert detail_contains.lower() in data["detail"].lower()
    return _assert


@pytest.fixture
def assert_no_credentials():
    """Helper to assert an account payload carries no password material."""
    def _assert(payload: dict):
        assert "hashed_password" not in payload
        assert "password" not in payload
        for value in payload.values():
            assert not (isinstance(value, str) and value.startswith("$2b$"))
    return _assert
