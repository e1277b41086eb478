"""User directory business logic."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

from query_portal.domain.errors import EmailAlreadyExistsError, InvalidCredentialsError
from query_portal.domain.models import PublicProfile, UserRecord
from query_portal.services.records import RecordStore
from query_portal.services.validation import validate_credentials, validate_signup

_logger = logging.getLogger(__name__)


@dataclass
class UserDirectoryService:
    """Application service for login and registration.

    Users are stored one document per user, keyed by their exact email.
    """

    store: RecordStore
    collection: str = "users"

    def authenticate(self, email: str | None, password: str | None) -> PublicProfile:
        """Return the profile for matching credentials.

        Unknown emails and wrong passwords raise the same error.
        """
        validate_credentials(email, password)
        document = self.store.get(self.collection, email)
        if document is None or document.get("password") != password:
            _logger.info("Login rejected")
            raise InvalidCredentialsError
        return UserRecord.from_document(document).public_profile()

    def register(
        self, name: str | None, email: str | None, password: str | None
    ) -> PublicProfile:
        """Create a new user and return its public profile."""
        validate_signup(name, email, password)
        existing = self.store.get_all(self.collection)
        if any(document.get("email") == email for document in existing.values()):
            raise EmailAlreadyExistsError

        record = UserRecord(
            id=str(uuid4()),
            name=name,
            email=email,
            password=password,
            created_at=datetime.now(tz=UTC),
        )
        # Another registration may have claimed the email since the read above.
        if not self.store.create_if_absent(
            self.collection, record.email, record.to_document()
        ):
            raise EmailAlreadyExistsError
        _logger.info("Registered user id=%s", record.id)
        return record.public_profile()

    def list_profiles(self) -> list[PublicProfile]:
        """Return all users ordered by creation time, without credentials."""
        records = [
            UserRecord.from_document(document)
            for document in self.store.get_all(self.collection).values()
        ]
        records.sort(key=lambda record: record.created_at)
        return [record.public_profile() for record in records]
