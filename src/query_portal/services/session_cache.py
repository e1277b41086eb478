"""Client-side cache of the last authenticated user."""

import json
import logging
from dataclasses import dataclass
from typing import Protocol

from query_portal.domain.models import PublicProfile

_logger = logging.getLogger(__name__)

CURRENT_USER_KEY = "currentUser"


class LocalStorage(Protocol):
    """Persistent string key-value storage owned by one client."""

    def get_item(self, key: str) -> str | None:
        """Return the stored string, if present."""

    def set_item(self, key: str, value: str) -> None:
        """Store a string under the key."""

    def remove_item(self, key: str) -> None:
        """Remove the key; absent keys are ignored."""


@dataclass
class SessionCache:
    """Stores the current user's public profile under one fixed key.

    None of the operations raise. Without a storage backend every call is a
    no-op.
    """

    storage: LocalStorage | None
    key: str = CURRENT_USER_KEY

    def save(self, profile: PublicProfile) -> None:
        """Persist the profile, replacing any previous one."""
        if self.storage is None:
            return
        try:
            self.storage.set_item(self.key, json.dumps(profile.to_dict()))
        except (OSError, TypeError, ValueError):
            _logger.exception("Failed to save user to storage")
            return
        _logger.info("User saved to storage")

    def load(self) -> PublicProfile | None:
        """Return the cached profile, or None when absent or unreadable."""
        if self.storage is None:
            return None
        try:
            raw = self.storage.get_item(self.key)
            if raw is None:
                return None
            payload = json.loads(raw)
            if not isinstance(payload, dict):
                raise ValueError("stored user is not an object")
            return PublicProfile.from_dict(payload)
        except (OSError, KeyError, TypeError, ValueError):
            _logger.warning("Ignoring unreadable user in storage", exc_info=True)
            return None

    def clear(self) -> None:
        """Forget the cached profile."""
        if self.storage is None:
            return
        try:
            self.storage.remove_item(self.key)
        except OSError:
            _logger.exception("Failed to clear user from storage")
