"""
Authentication dependencies for route protection.
"""
from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from motor.motor_asyncio import AsyncIOMotorDatabase

from myflix.core.security import TokenService
from myflix.dependencies.services import get_myflix_db
from myflix.models.account import Account
from myflix.services.identity import IdentityVerifier
from myflix.stores.accounts import AccountStore

# auto_error=False so a missing header goes through the verifier like any
# other credential failure
bearer_scheme = HTTPBearer(auto_error=False, description="JWT access token from POST /login")


async def get_current_account(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    db: AsyncIOMotorDatabase = Depends(get_myflix_db),
) -> Account:
    """
    Dependency to get the current authenticated account from the bearer token.

    Token is passed in the header: ``Authorization: Bearer <token>``

    Raises:
        UnauthorizedError: Rendered as a uniform 401 by the app's error handler
    """
    token = credentials.credentials if credentials else None
    verifier = IdentityVerifier(TokenService(), AccountStore(db))
    return await verifier.resolve(token)


# Type alias for cleaner route signatures
CurrentAccount = Annotated[Account, Depends(get_current_account)]
