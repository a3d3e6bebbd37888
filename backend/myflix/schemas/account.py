"""
Account request/response schemas.
"""
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from myflix.models.account import Account


class AccountInput(BaseModel):
    """
    Registration and full-replace update body.

    Fields are optional at the schema level so that the service can report
    a missing field as a bad request and rule failures as validation errors.
    """
    username: Optional[str] = Field(None, description="Display name (min 5 alphanumeric characters)")
    password: Optional[str] = Field(None, description="Plain password, hashed before storage")
    email: Optional[str] = Field(None, description="Contact email address")
    birthday: Optional[date] = Field(None, description="Birth date (YYYY-MM-DD)")


class AccountResponse(BaseModel):
    """Account information response (excludes the password hash)."""
    id: str = Field(..., description="Account ID")
    username: str = Field(..., description="Display name")
    email: str = Field(..., description="Contact email address")
    birthday: Optional[date] = Field(None, description="Birth date")
    favorite_movies: list[str] = Field(default_factory=list, description="Favorite movie ids")
    roles: list[str] = Field(..., description="Account roles")
    created_at: datetime = Field(..., description="Account creation date")

    @classmethod
    def from_account(cls, account: Account) -> "AccountResponse":
        return cls(
            id=account.id,
            username=account.username,
            email=account.email,
            birthday=account.birthday,
            favorite_movies=list(account.favorite_movies),
            roles=list(account.roles),
            created_at=account.created_at,
        )


class MessageResponse(BaseModel):
    """Plain confirmation message."""
    message: str
