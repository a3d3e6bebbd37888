"""
Authentication request/response schemas.
"""
from datetime import datetime

from pydantic import BaseModel, Field

from myflix.schemas.account import AccountResponse


class LoginRequest(BaseModel):
    """Login request body."""
    username: str = Field(..., description="Display name")
    password: str = Field(..., description="Account password")


class LoginResponse(BaseModel):
    """Login response with JWT token."""
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Token expiration time in seconds")
    account: AccountResponse = Field(..., description="Authenticated account")


class TokenPayload(BaseModel):
    """Decoded JWT token payload."""
    sub: str = Field(..., description="Subject (account ID)")
    roles: list[str] = Field(default_factory=list, description="Account roles")
    exp: datetime = Field(..., description="Expiration time")
    iat: datetime = Field(..., description="Issued at time")
