"""Domain models for the user directory."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the directory."""

    id: str
    name: str
    email: str
    password: str
    created_at: datetime

    def to_document(self) -> dict[str, object]:
        """Return the stored document for this user."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "password": self.password,
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_document(cls, document: dict[str, object]) -> "UserRecord":
        """Build a user from a stored document."""
        return cls(
            id=str(document["id"]),
            name=str(document.get("name", "")),
            email=str(document["email"]),
            password=str(document.get("password", "")),
            created_at=datetime.fromisoformat(str(document["createdAt"])),
        )

    def public_profile(self) -> "PublicProfile":
        """Project the record without its credential fields."""
        return PublicProfile(
            email=self.email,
            name=self.name,
            id=self.id,
            created_at=self.created_at.isoformat(),
        )


@dataclass(frozen=True)
class PublicProfile:
    """User data that is safe to return to clients and cache locally."""

    email: str
    name: str | None = None
    id: str | None = None
    created_at: str | None = None
    company_id: str | None = None
    role: str | None = None

    def to_dict(self) -> dict[str, str]:
        """Serialize to the camelCase wire shape, omitting unset fields."""
        payload = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "createdAt": self.created_at,
            "companyId": self.company_id,
            "role": self.role,
        }
        return {key: value for key, value in payload.items() if value is not None}

    @classmethod
    def from_dict(cls, payload: dict[str, object]) -> "PublicProfile":
        """Parse the wire shape produced by ``to_dict``."""
        email = payload["email"]
        if not isinstance(email, str) or not email:
            raise ValueError("profile email must be a non-empty string")

        def _optional(key: str) -> str | None:
            value = payload.get(key)
            return str(value) if value is not None else None

        return cls(
            email=email,
            name=_optional("name"),
            id=_optional("id"),
            created_at=_optional("createdAt"),
            company_id=_optional("companyId"),
            role=_optional("role"),
        )
