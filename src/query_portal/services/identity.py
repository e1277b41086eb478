"""Identity provider interface used when seeding customer credentials."""

from dataclasses import dataclass
from typing import Protocol

from query_portal.domain.errors import EmailAlreadyExistsError
from query_portal.services.users import UserDirectoryService


class IdentityAlreadyExistsError(Exception):
    """Raised when the identity provider already knows the email."""


class IdentityProvider(Protocol):
    """Creates login accounts outside the directory documents."""

    def create_user(self, email: str, password: str, display_name: str) -> str:
        """Create an account and return its provider uid."""


@dataclass
class DirectoryIdentityProvider(IdentityProvider):
    """Registers seeded accounts in the local user directory."""

    directory: UserDirectoryService

    def create_user(self, email: str, password: str, display_name: str) -> str:
        """Register the account and return the new user id."""
        try:
            profile = self.directory.register(display_name, email, password)
        except EmailAlreadyExistsError as exc:
            raise IdentityAlreadyExistsError(email) from exc
        return str(profile.id)
