"""
Error taxonomy for the access layer.

Every error carries the HTTP status it maps to; the handlers registered in
``myflix.main`` turn them into JSON responses.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CredentialFailure(str, Enum):
    """Why a bearer credential could not be resolved. Logged, never returned."""
    MISSING = "missing"
    MALFORMED = "malformed"
    EXPIRED = "expired"
    INVALID_SIGNATURE = "invalid_signature"
    UNKNOWN_SUBJECT = "unknown_subject"
    INVALID_PASSWORD = "invalid_password"


@dataclass(frozen=True)
class Violation:
    """A single failed field rule."""
    field: str
    message: str


class MyFlixError(Exception):
    """Base class for all errors raised by the service layer."""

    status_code: int = 500
    default_detail: str = "Internal server error"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.detail}"


class BadRequestError(MyFlixError):
    """A required input field is missing or unusable."""
    status_code = 400
    default_detail = "Bad request"


class ValidationFailure(MyFlixError):
    """One or more field rules failed."""
    status_code = 422
    default_detail = "Validation failed"

    def __init__(self, violations: list[Violation], detail: Optional[str] = None):
        self.violations = list(violations)
        super().__init__(detail)


class UnauthorizedError(MyFlixError):
    """The bearer credential is absent or could not be verified."""
    status_code = 401
    default_detail = "Unauthorized"

    def __init__(self, reason: CredentialFailure, detail: Optional[str] = None):
        self.reason = reason
        super().__init__(detail)


class ForbiddenError(MyFlixError):
    """The caller may not act on the target account."""
    status_code = 403
    default_detail = "Not allowed to modify another account"


class NotFoundError(MyFlixError):
    """An entity or relationship target does not exist."""
    status_code = 404
    default_detail = "Not found"


class ConflictError(MyFlixError):
    """A unique field is already taken."""
    status_code = 409
    default_detail = "Already exists"
