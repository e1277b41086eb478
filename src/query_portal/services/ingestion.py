"""Batch ingestion of seed records into the record store."""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

import pydantic

from query_portal.domain.errors import ErrorKind, StoreUnavailableError
from query_portal.domain.seeds import Customer, SeedModel, SeedRecord
from query_portal.services.identity import IdentityAlreadyExistsError, IdentityProvider
from query_portal.services.records import Document, RecordStore

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IngestOutcome:
    """Result of writing one seed record."""

    collection: str
    key: str
    error: str | None = None
    kind: ErrorKind | None = None

    @property
    def succeeded(self) -> bool:
        """Return True when the record was stored."""
        return self.error is None

    def to_dict(self) -> dict[str, object]:
        """Serialize for API responses."""
        return {
            "collection": self.collection,
            "key": self.key,
            "succeeded": self.succeeded,
            "error": self.error,
            "kind": self.kind,
        }


@dataclass
class SeedIngestionRunner:
    """Upserts seed records one at a time, tolerating per-record failures.

    Every record is written with a full-replace ``set`` under its
    deterministic key, so re-running a batch converges to the same state.
    Chat sessions are the exception: their keys embed the current time and a
    random suffix, so each run adds new documents.
    """

    store: RecordStore
    identity_provider: IdentityProvider | None = None

    def ingest(self, records: Sequence[SeedRecord]) -> list[IngestOutcome]:
        """Write every record and return one outcome per record, in order."""
        return [self._ingest_record(record) for record in records]

    def ingest_rows(
        self, model: type[SeedModel], rows: Iterable[Mapping[str, object]]
    ) -> list[IngestOutcome]:
        """Validate raw rows against a seed schema and ingest the valid ones.

        Rows that fail validation are reported as failures keyed ``row-<n>``.
        """
        outcomes = []
        for index, row in enumerate(rows, start=1):
            try:
                record = model.model_validate(row)
            except pydantic.ValidationError as exc:
                outcome = IngestOutcome(
                    collection=model.collection,
                    key=f"row-{index}",
                    error=_summarize_validation_error(exc),
                    kind=ErrorKind.PER_RECORD_INGEST_FAILURE,
                )
                _log_outcome(outcome)
                outcomes.append(outcome)
                continue
            outcomes.append(self._ingest_record(record))
        return outcomes

    def _ingest_record(self, record: SeedRecord) -> IngestOutcome:
        key = record.document_key()
        try:
            document = self._build_document(record)
            self.store.set(record.collection, key, document)
        except Exception as exc:  # noqa: BLE001
            outcome = IngestOutcome(
                collection=record.collection,
                key=key,
                error=str(exc) or type(exc).__name__,
                kind=(
                    ErrorKind.STORE_UNAVAILABLE
                    if isinstance(exc, StoreUnavailableError)
                    else ErrorKind.PER_RECORD_INGEST_FAILURE
                ),
            )
        else:
            outcome = IngestOutcome(collection=record.collection, key=key)
        _log_outcome(outcome)
        return outcome

    def _build_document(self, record: SeedRecord) -> Document:
        if not isinstance(record, Customer):
            return record.document()

        now = datetime.now(tz=UTC).isoformat()
        document = record.document()
        document.update({"createdAt": now, "updatedAt": now, "lastLogin": None})
        if self.identity_provider is None:
            return document
        # The login is created before the document is written. If the write
        # fails, a re-run finds the existing login and writes the document
        # without a uid.
        try:
            document["uid"] = self.identity_provider.create_user(
                record.email, record.password, record.name
            )
        except IdentityAlreadyExistsError:
            _logger.info("Login account already exists for %s", record.email)
        return document


def summarize(outcomes: Sequence[IngestOutcome]) -> tuple[int, int]:
    """Return ``(succeeded, failed)`` counts."""
    succeeded = sum(1 for outcome in outcomes if outcome.succeeded)
    return succeeded, len(outcomes) - succeeded


def store_unreachable(outcomes: Sequence[IngestOutcome]) -> bool:
    """Return True when every record of a non-empty batch hit an unavailable store."""
    return bool(outcomes) and all(
        outcome.kind is ErrorKind.STORE_UNAVAILABLE for outcome in outcomes
    )


def _log_outcome(outcome: IngestOutcome) -> None:
    if outcome.succeeded:
        _logger.info("Uploaded %s/%s", outcome.collection, outcome.key)
    else:
        _logger.warning(
            "Failed to upload %s/%s: %s",
            outcome.collection,
            outcome.key,
            outcome.error,
        )


def _summarize_validation_error(exc: pydantic.ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or 'row'}: {error['msg']}"
        for error in exc.errors()
    )
