"""
Account model for the users collection.
"""
from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class AccountRole(str, Enum):
    """Account role levels."""
    USER = "user"
    ADMIN = "admin"


class Account(BaseModel):
    """
    Account document model for the MongoDB users collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    username: str = Field(..., description="Unique display name")
    hashed_password: str = Field(..., description="Bcrypt hashed password")
    email: str = Field(..., description="Contact email address")
    birthday: Optional[date] = Field(None, description="Birth date")
    favorite_movies: list[str] = Field(
        default_factory=list,
        description="Set of favorite movie ids"
    )
    roles: list[AccountRole] = Field(
        default=[AccountRole.USER],
        description="List of roles assigned to the account"
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Account creation timestamp"
    )

    class Config:
        populate_by_name = True
        use_enum_values = True

    @property
    def is_admin(self) -> bool:
        return AccountRole.ADMIN.value in self.roles

    @classmethod
    def from_document(cls, doc: dict) -> "Account":
        """Build an Account from a raw MongoDB document."""
        doc = dict(doc)
        doc["_id"] = str(doc["_id"])
        return cls(**doc)
