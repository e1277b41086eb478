"""JSON-file key-value storage for terminal clients."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from query_portal.services.session_cache import LocalStorage

_logger = logging.getLogger(__name__)


@dataclass
class FileLocalStorage(LocalStorage):
    """Stores string values in a single JSON object on disk."""

    path: Path

    def get_item(self, key: str) -> str | None:
        """Return the stored string, if present."""
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        """Store a string under the key."""
        items = self._read()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        """Remove the key if present."""
        items = self._read()
        if items.pop(key, None) is not None:
            self._write(items)

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except ValueError:
            _logger.warning("Resetting unreadable storage file %s", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, items: dict[str, object]) -> None:
        self.path.write_text(json.dumps(items), encoding="utf-8")


def build_local_storage(path: Path | None) -> FileLocalStorage | None:
    """Return file storage at the path, or None when it cannot be used."""
    if path is None:
        return None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        _logger.warning("Local storage unavailable at %s", path)
        return None
    return FileLocalStorage(path)
