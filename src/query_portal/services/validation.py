"""Input validation for login and signup requests."""

import re

from query_portal.domain.errors import ErrorKind, ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6


def validate_credentials(email: str | None, password: str | None) -> None:
    """Ensure both login fields are present."""
    if not email or not password:
        raise ValidationError(
            ErrorKind.MISSING_FIELD, "Email and password are required"
        )


def validate_signup(name: str | None, email: str | None, password: str | None) -> None:
    """Ensure signup fields are present, the email is well formed and the
    password is long enough.
    """
    if not name or not email or not password:
        raise ValidationError(
            ErrorKind.MISSING_FIELD, "Name, email and password are required"
        )
    if not EMAIL_PATTERN.fullmatch(email):
        raise ValidationError(ErrorKind.INVALID_EMAIL_FORMAT, "Invalid email format")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            ErrorKind.PASSWORD_TOO_SHORT,
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
        )
