"""
Core module - Security, validation, errors and logging.
"""
from myflix.core.exceptions import (
    BadRequestError,
    ConflictError,
    CredentialFailure,
    ForbiddenError,
    MyFlixError,
    NotFoundError,
    UnauthorizedError,
    ValidationFailure,
    Violation,
)
from myflix.core.security import PasswordHasher, TokenService
from myflix.core.validation import validate_account_input

__all__ = [
    "BadRequestError",
    "ConflictError",
    "CredentialFailure",
    "ForbiddenError",
    "MyFlixError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationFailure",
    "Violation",
    "PasswordHasher",
    "TokenService",
    "validate_account_input",
]
