"""Supabase-backed record store.

Each collection is a table with an ``id text primary key`` column holding the
store key and a ``data jsonb`` column holding the document.
"""

from dataclasses import dataclass

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from query_portal.domain.errors import StoreUnavailableError
from query_portal.services.records import Document, RecordStore

_UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseRecordStore(RecordStore):
    """Supabase implementation of the record store."""

    client: Client

    def get(self, collection: str, key: str) -> Document | None:
        """Return the document stored under the key, if present."""
        response = self._execute(
            self.client.table(collection).select("id, data").eq("id", key).limit(1),
            f"read {collection}/{key}",
        )
        if not response.data:
            return None
        return response.data[0]["data"]

    def get_all(self, collection: str) -> dict[str, Document]:
        """Return every document in the table."""
        response = self._execute(
            self.client.table(collection).select("id, data"),
            f"list {collection}",
        )
        return {row["id"]: row["data"] for row in response.data or []}

    def set(self, collection: str, key: str, document: Document) -> None:
        """Upsert the row, replacing the stored document."""
        self._execute(
            self.client.table(collection).upsert({"id": key, "data": document}),
            f"write {collection}/{key}",
        )

    def delete(self, collection: str, key: str) -> None:
        """Delete the row for the key."""
        self._execute(
            self.client.table(collection).delete().eq("id", key),
            f"delete {collection}/{key}",
        )

    def create_if_absent(self, collection: str, key: str, document: Document) -> bool:
        """Insert the row, relying on the primary key to reject duplicates."""
        query = self.client.table(collection).insert({"id": key, "data": document})
        failure = f"Supabase insert {collection}/{key} failed"
        try:
            query.execute()
        except APIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                return False
            raise StoreUnavailableError(failure) from exc
        except httpx.HTTPError as exc:
            raise StoreUnavailableError(failure) from exc
        return True

    def find_by_field(
        self, collection: str, field: str, value: object
    ) -> list[tuple[str, Document]]:
        """Filter on a top-level document field, compared as text."""
        response = self._execute(
            self.client.table(collection)
            .select("id, data")
            .eq(f"data->>{field}", str(value)),
            f"query {collection}.{field}",
        )
        return [(row["id"], row["data"]) for row in response.data or []]

    @staticmethod
    def _execute(query, action: str):  # type: ignore[no-untyped-def]
        try:
            return query.execute()
        except (APIError, httpx.HTTPError) as exc:
            raise StoreUnavailableError(f"Supabase {action} failed") from exc
