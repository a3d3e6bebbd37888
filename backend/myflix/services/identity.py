"""
Identity verification: bearer token -> Account.
"""
import logging
from typing import Optional

from pydantic import ValidationError

from myflix.core.exceptions import CredentialFailure, UnauthorizedError
from myflix.core.security import TokenService
from myflix.models.account import Account
from myflix.schemas.auth import TokenPayload
from myflix.stores.accounts import AccountStore

logger = logging.getLogger(__name__)


class IdentityVerifier:
    """Resolves a bearer token to the account it was issued for."""

    def __init__(self, tokens: TokenService, accounts: AccountStore):
        self.tokens = tokens
        self.accounts = accounts

    async def resolve(self, token: Optional[str]) -> Account:
        """
        Verify the token and load its subject.

        Read-only: never writes to the store.

        Raises:
            UnauthorizedError: with the failure reason (for logs only)
        """
        try:
            claims = self._claims(token)
        except UnauthorizedError as e:
            logger.info("Rejected bearer credential: %s", e.reason.value)
            raise

        account = await self.accounts.find_by_id(claims.sub)
        if account is None:
            logger.info("Rejected bearer credential: %s", CredentialFailure.UNKNOWN_SUBJECT.value)
            raise UnauthorizedError(CredentialFailure.UNKNOWN_SUBJECT)

        return account

    def _claims(self, token: Optional[str]) -> TokenPayload:
        payload = self.tokens.verify(token)
        try:
            return TokenPayload(**payload)
        except ValidationError:
            raise UnauthorizedError(CredentialFailure.MALFORMED)
