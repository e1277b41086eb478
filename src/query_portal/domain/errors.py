"""Error taxonomy shared by services and the HTTP layer."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Categories of failures surfaced by the portal."""

    MISSING_FIELD = "missing_field"
    INVALID_EMAIL_FORMAT = "invalid_email_format"
    PASSWORD_TOO_SHORT = "password_too_short"
    INVALID_CREDENTIALS = "invalid_credentials"
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    STORE_UNAVAILABLE = "store_unavailable"
    PER_RECORD_INGEST_FAILURE = "per_record_ingest_failure"


class PortalError(Exception):
    """Base error carrying a kind and a client-safe message."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


class ValidationError(PortalError):
    """Raised when request input fails validation."""


class InvalidCredentialsError(PortalError):
    """Raised for any failed login, whatever the underlying reason."""

    def __init__(self) -> None:
        super().__init__(ErrorKind.INVALID_CREDENTIALS, "Invalid credentials")


class EmailAlreadyExistsError(PortalError):
    """Raised when registering an email that is already taken."""

    def __init__(self) -> None:
        super().__init__(
            ErrorKind.EMAIL_ALREADY_EXISTS, "User with this email already exists"
        )


class StoreUnavailableError(PortalError):
    """Raised when the record store cannot complete an operation."""

    def __init__(self, detail: str) -> None:
        super().__init__(ErrorKind.STORE_UNAVAILABLE, detail)
