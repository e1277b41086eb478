"""Admin API endpoints with simple token auth."""

from __future__ import annotations

import csv
import logging
import secrets
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from query_portal.seed import DATASETS, run_dataset
from query_portal.services.ingestion import store_unreachable, summarize

if TYPE_CHECKING:
    from query_portal.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])

_logger = logging.getLogger(__name__)


def _get_admin_token(request: Request) -> str | None:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str | None = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if (
        not admin_token
        or not x_admin_token
        or not secrets.compare_digest(x_admin_token, admin_token)
    ):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/users", dependencies=[Depends(require_admin)])
def list_users(request: Request) -> dict[str, object]:
    """Return directory users without their credentials."""
    container: AppContainer = request.app.state.container
    profiles = container.user_directory.list_profiles()
    return {"users": [profile.to_dict() for profile in profiles]}


@router.post("/seed/{dataset}", dependencies=[Depends(require_admin)])
def seed_dataset(dataset: str, request: Request) -> dict[str, object]:
    """Run one seed dataset and report per-record outcomes."""
    if dataset not in DATASETS:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Unknown dataset"
        )
    container: AppContainer = request.app.state.container
    try:
        outcomes = run_dataset(container, dataset)
    except FileNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Seed source not found"
        ) from exc
    except (OSError, csv.Error) as exc:
        _logger.exception("Failed to load seed dataset %s", dataset)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        ) from exc
    if store_unreachable(outcomes):
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Record store unavailable",
        )
    succeeded, failed = summarize(outcomes)
    return {
        "outcomes": [outcome.to_dict() for outcome in outcomes],
        "succeeded": succeeded,
        "failed": failed,
    }
