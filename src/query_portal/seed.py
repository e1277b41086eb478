"""Administrative jobs that load the sample datasets into the record store.

Each job exits 0 when the batch ran, even if some records failed, and 1
when it could not start (bad settings, unreadable CSV) or every record of a
dataset failed because the store was unreachable.
"""

import csv
import logging
from collections.abc import Callable, Sequence

from query_portal import seed_data
from query_portal.app_logging import configure_logging
from query_portal.containers import AppContainer, build_container
from query_portal.domain.seeds import Employee
from query_portal.services.ingestion import (
    IngestOutcome,
    store_unreachable,
    summarize,
)

_logger = logging.getLogger(__name__)


def _companies(container: AppContainer) -> list[IngestOutcome]:
    return container.seed_runner.ingest(seed_data.COMPANIES)


def _customers(container: AppContainer) -> list[IngestOutcome]:
    return container.seed_runner.ingest(seed_data.CUSTOMERS)


def _chat_history(container: AppContainer) -> list[IngestOutcome]:
    return container.seed_runner.ingest(seed_data.CHAT_SESSIONS)


def _attendance(container: AppContainer) -> list[IngestOutcome]:
    return container.seed_runner.ingest(seed_data.ATTENDANCE)


def _work_hours(container: AppContainer) -> list[IngestOutcome]:
    return container.seed_runner.ingest(seed_data.WORK_HOURS)


def _faq(container: AppContainer) -> list[IngestOutcome]:
    return container.seed_runner.ingest(seed_data.FAQS)


def _employees(container: AppContainer) -> list[IngestOutcome]:
    rows = seed_data.read_employee_rows(container.settings.employees_csv_path)
    return container.seed_runner.ingest_rows(Employee, rows)


DATASETS: dict[str, Callable[[AppContainer], list[IngestOutcome]]] = {
    "companies": _companies,
    "customers": _customers,
    "chat-history": _chat_history,
    "attendance": _attendance,
    "work-hours": _work_hours,
    "faq": _faq,
    "employees": _employees,
}


def run_dataset(container: AppContainer, name: str) -> list[IngestOutcome]:
    """Ingest one named dataset and return its outcomes."""
    _logger.info("Starting %s seeding", name)
    outcomes = DATASETS[name](container)
    succeeded, failed = summarize(outcomes)
    _logger.info("Finished %s seeding: %s uploaded, %s failed", name, succeeded, failed)
    return outcomes


def run_job(
    names: Sequence[str],
    *,
    container: AppContainer | None = None,
    skip_missing_sources: bool = False,
) -> int:
    """Run datasets in order and return the process exit code."""
    configure_logging()
    if container is None:
        try:
            container = build_container()
        except Exception:
            _logger.exception("Seed setup failed")
            return 1
    configure_logging(container.settings.log_level)

    for name in names:
        try:
            outcomes = run_dataset(container, name)
        except FileNotFoundError as exc:
            if skip_missing_sources:
                _logger.info("Skipping %s: %s not found", name, exc.filename)
                continue
            _logger.exception("Seed source for %s not found", name)
            return 1
        except (OSError, csv.Error):
            _logger.exception("Failed to load seed source for %s", name)
            return 1
        if store_unreachable(outcomes):
            _logger.error("Record store unreachable while seeding %s", name)
            return 1
    return 0


def seed_all() -> int:
    """Seed every dataset; the employee CSV is optional here."""
    return run_job(list(DATASETS), skip_missing_sources=True)


def seed_companies() -> int:
    """Seed the companies collection."""
    return run_job(["companies"])


def seed_customers() -> int:
    """Seed customers and their login accounts."""
    return run_job(["customers"])


def seed_chat_history() -> int:
    """Seed sample chat sessions."""
    return run_job(["chat-history"])


def seed_attendance() -> int:
    """Seed monthly absentee records."""
    return run_job(["attendance"])


def seed_work_hours() -> int:
    """Seed monthly work-hour records."""
    return run_job(["work-hours"])


def seed_faq() -> int:
    """Seed the FAQ collection."""
    return run_job(["faq"])


def seed_employees() -> int:
    """Seed employees from the configured CSV export."""
    return run_job(["employees"])
