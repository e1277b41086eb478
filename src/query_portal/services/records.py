"""Record store interface shared by the directory and the seed runner."""

from typing import Protocol

Document = dict[str, object]


class RecordStore(Protocol):
    """Document database addressed by collection and key.

    Implementations raise ``StoreUnavailableError`` when the backend cannot
    complete an operation.
    """

    def get(self, collection: str, key: str) -> Document | None:
        """Return the document stored under the key, if present."""

    def get_all(self, collection: str) -> dict[str, Document]:
        """Return every document of a collection keyed by its store key."""

    def set(self, collection: str, key: str, document: Document) -> None:
        """Create or fully replace the document stored under the key."""

    def delete(self, collection: str, key: str) -> None:
        """Remove the document; absent keys are ignored."""

    def create_if_absent(self, collection: str, key: str, document: Document) -> bool:
        """Insert the document unless the key exists; return True if inserted."""

    def find_by_field(
        self, collection: str, field: str, value: object
    ) -> list[tuple[str, Document]]:
        """Return ``(key, document)`` pairs whose field equals the value."""
