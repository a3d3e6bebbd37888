"""
Security collaborators: password hashing and JWT bearer tokens.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import ExpiredSignatureError, JWTError, jwt
from jose.exceptions import JWTClaimsError
from passlib.context import CryptContext

from myflix.config import Settings, get_settings
from myflix.core.exceptions import CredentialFailure, UnauthorizedError


class PasswordHasher:
    """One-way salted hashing of account passwords (bcrypt)."""

    def __init__(self, context: Optional[CryptContext] = None):
        self.context = context or CryptContext(schemes=["bcrypt"], deprecated="auto")

    def hash(self, plain_password: str) -> str:
        """
        Hash a plain password using bcrypt.

        Args:
            plain_password: The plain text password to hash

        Returns:
            Hashed password string
        """
        return self.context.hash(plain_password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain password against a hashed password.

        Returns:
            True if password matches, False otherwise
        """
        try:
            return self.context.verify(plain_password, hashed_password)
        except ValueError:
            # Stored value is not a recognised hash
            return False


class TokenService:
    """Issues and verifies JWT access tokens."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    @property
    def expires_in_seconds(self) -> int:
        return self.settings.jwt_access_token_expire_minutes * 60

    def issue(
        self,
        account_id: str,
        roles: list[str],
        expires_delta: timedelta | None = None,
    ) -> str:
        """
        Create a JWT access token.

        Args:
            account_id: Unique account identifier, stored as ``sub``
            roles: Account roles (e.g., ["user"], ["admin"])
            expires_delta: Optional custom expiration time

        Returns:
            Encoded JWT token string
        """
        if expires_delta is None:
            expires_delta = timedelta(minutes=self.settings.jwt_access_token_expire_minutes)

        now = datetime.now(timezone.utc)
        payload = {
            "sub": account_id,
            "roles": roles,
            "exp": now + expires_delta,
            "iat": now,
        }

        return jwt.encode(
            payload,
            self.settings.jwt_secret_key,
            algorithm=self.settings.jwt_algorithm,
        )

    def verify(self, token: Optional[str]) -> dict[str, Any]:
        """
        Decode and validate a JWT token.

        Returns:
            Decoded payload with keys: sub, roles, exp, iat

        Raises:
            UnauthorizedError: with the reason the token was rejected
        """
        if not token:
            raise UnauthorizedError(CredentialFailure.MISSING)
        if token.count(".") != 2:
            raise UnauthorizedError(CredentialFailure.MALFORMED)

        try:
            payload = jwt.decode(
                token,
                self.settings.jwt_secret_key,
                algorithms=[self.settings.jwt_algorithm],
            )
        except ExpiredSignatureError:
            raise UnauthorizedError(CredentialFailure.EXPIRED)
        except JWTClaimsError:
            raise UnauthorizedError(CredentialFailure.MALFORMED)
        except JWTError:
            raise UnauthorizedError(CredentialFailure.INVALID_SIGNATURE)

        if not isinstance(payload.get("sub"), str):
            raise UnauthorizedError(CredentialFailure.MALFORMED)

        return payload
