"""
Field rules for account input.

Pure functions: no I/O, same input gives the same violations in the same
order. Callers reject the whole request on any violation before touching
storage.
"""
import re
from typing import Any, Iterable, Mapping

from email_validator import EmailNotValidError, validate_email

from myflix.core.exceptions import BadRequestError, ValidationFailure, Violation

USERNAME_MIN_LENGTH = 5

_USERNAME_PATTERN = re.compile(r"[A-Za-z0-9]+")

ACCOUNT_REQUIRED_FIELDS = ("username", "password", "email")


def check_username_length(username: str) -> list[Violation]:
    if len(username) < USERNAME_MIN_LENGTH:
        return [Violation("username", f"Username must be at least {USERNAME_MIN_LENGTH} characters long")]
    return []


def check_username_characters(username: str) -> list[Violation]:
    # fullmatch: a trailing newline must not slip past the pattern
    if not _USERNAME_PATTERN.fullmatch(username):
        return [Violation("username", "Username contains non alphanumeric characters - not allowed")]
    return []


def check_password_present(password: str) -> list[Violation]:
    if not password:
        return [Violation("password", "Password is required")]
    return []


def check_email_shape(email: str) -> list[Violation]:
    """Syntax check only; no DNS lookup."""
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return [Violation("email", "Email does not appear to be valid")]
    return []


def validate_account_input(record: Mapping[str, Any]) -> list[Violation]:
    """
    Run every account rule against a candidate record.

    Missing values are treated as empty strings so the rules stay total.

    Returns:
        Ordered list of violations, empty when the record is acceptable
    """
    username = record.get("username") or ""
    password = record.get("password") or ""
    email = record.get("email") or ""

    violations: list[Violation] = []
    violations.extend(check_username_length(username))
    violations.extend(check_username_characters(username))
    violations.extend(check_password_present(password))
    violations.extend(check_email_shape(email))
    return violations


def require_fields(record: Mapping[str, Any], fields: Iterable[str] = ACCOUNT_REQUIRED_FIELDS) -> None:
    """Raise BadRequestError for the first field absent from the record."""
    for field in fields:
        if record.get(field) is None:
            raise BadRequestError(f"Missing {field} in request body")


def ensure_valid_account_input(record: Mapping[str, Any]) -> None:
    """Presence check followed by the field rules; raises on the first failing stage."""
    require_fields(record)
    violations = validate_account_input(record)
    if violations:
        raise ValidationFailure(violations)
