"""Record store persisted as one JSON file per collection."""

import json
import os
import re
import tempfile
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from filelock import FileLock

from query_portal.domain.errors import StoreUnavailableError
from query_portal.services.records import Document, RecordStore

_COLLECTION_NAME = re.compile(r"^[A-Za-z0-9_-]+$")


@dataclass
class JsonFileRecordStore(RecordStore):
    """File-backed store where each write rewrites the whole collection.

    Mutations hold a thread lock and a per-collection lock file for the full
    read-modify-write, then replace the data file atomically. Writers in other
    threads or processes sharing the directory never lose each other's
    updates, and readers always see a complete file.
    """

    root: Path
    lock_timeout: float = 10.0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def get(self, collection: str, key: str) -> Document | None:
        with self._lock:
            return self._read(collection).get(key)

    def get_all(self, collection: str) -> dict[str, Document]:
        with self._lock:
            return self._read(collection)

    def set(self, collection: str, key: str, document: Document) -> None:
        with self._mutating(collection):
            documents = self._read(collection)
            documents[key] = document
            self._write(collection, documents)

    def delete(self, collection: str, key: str) -> None:
        with self._mutating(collection):
            documents = self._read(collection)
            if documents.pop(key, None) is not None:
                self._write(collection, documents)

    def create_if_absent(self, collection: str, key: str, document: Document) -> bool:
        with self._mutating(collection):
            documents = self._read(collection)
            if key in documents:
                return False
            documents[key] = document
            self._write(collection, documents)
            return True

    def find_by_field(
        self, collection: str, field: str, value: object
    ) -> list[tuple[str, Document]]:
        with self._lock:
            return [
                (key, document)
                for key, document in self._read(collection).items()
                if document.get(field) == value
            ]

    @contextmanager
    def _mutating(self, collection: str) -> Iterator[None]:
        path = self._path(collection)
        with self._lock:
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                file_lock = FileLock(
                    path.with_name(f".{collection}.lock"), timeout=self.lock_timeout
                )
                file_lock.acquire()
            except OSError as exc:
                raise StoreUnavailableError(f"Failed to lock {path}") from exc
            try:
                yield
            finally:
                file_lock.release()

    def _path(self, collection: str) -> Path:
        if not _COLLECTION_NAME.match(collection):
            raise ValueError(f"Invalid collection name: {collection!r}")
        return self.root / f"{collection}.json"

    def _read(self, collection: str) -> dict[str, Document]:
        path = self._path(collection)
        if not path.exists():
            return {}
        try:
            with path.open(encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, ValueError) as exc:
            raise StoreUnavailableError(f"Failed to read {path}") from exc
        if not isinstance(data, dict):
            raise StoreUnavailableError(f"{path} does not contain a JSON object")
        return data

    def _write(self, collection: str, documents: dict[str, Document]) -> None:
        path = self._path(collection)
        temp_name: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{collection}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                temp_name = handle.name
                json.dump(documents, handle, indent=2)
            os.replace(temp_name, path)
        except (OSError, TypeError, ValueError) as exc:
            if temp_name is not None:
                Path(temp_name).unlink(missing_ok=True)
            raise StoreUnavailableError(f"Failed to write {path}") from exc
