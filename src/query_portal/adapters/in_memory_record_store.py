"""In-process record store for local development and tests."""

import copy
import threading
from dataclasses import dataclass, field

from query_portal.services.records import Document, RecordStore


@dataclass
class InMemoryRecordStore(RecordStore):
    """Dict-backed record store; documents are copied in and out."""

    collections: dict[str, dict[str, Document]] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def get(self, collection: str, key: str) -> Document | None:
        with self._lock:
            document = self.collections.get(collection, {}).get(key)
            return copy.deepcopy(document) if document is not None else None

    def get_all(self, collection: str) -> dict[str, Document]:
        with self._lock:
            return copy.deepcopy(self.collections.get(collection, {}))

    def set(self, collection: str, key: str, document: Document) -> None:
        with self._lock:
            self.collections.setdefault(collection, {})[key] = copy.deepcopy(document)

    def delete(self, collection: str, key: str) -> None:
        with self._lock:
            self.collections.get(collection, {}).pop(key, None)

    def create_if_absent(self, collection: str, key: str, document: Document) -> bool:
        with self._lock:
            documents = self.collections.setdefault(collection, {})
            if key in documents:
                return False
            documents[key] = copy.deepcopy(document)
            return True

    def find_by_field(
        self, collection: str, field: str, value: object
    ) -> list[tuple[str, Document]]:
        with self._lock:
            return [
                (key, copy.deepcopy(document))
                for key, document in self.collections.get(collection, {}).items()
                if document.get(field) == value
            ]
