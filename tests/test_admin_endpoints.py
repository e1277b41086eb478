"""Tests for admin endpoints."""

import inspect
from pathlib import Path

import pytest
from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from query_portal.adapters.in_memory_record_store import InMemoryRecordStore
from query_portal.api.app import create_app
from query_portal.containers import AppContainer
from query_portal.domain.errors import StoreUnavailableError
from query_portal.services.users import UserDirectoryService

ADMIN_HEADERS = {"X-Admin-Token": "admin-token"}


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def test_admin_users_endpoint_hides_passwords(
    client: TestClient, user_directory: UserDirectoryService
) -> None:
    user_directory.register("Ada", "ada@example.com", "secret1")
    user_directory.register("Bob", "bob@example.com", "secret2")

    response = client.get("/admin/users", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    users = response.json()["users"]
    assert [user["email"] for user in users] == ["ada@example.com", "bob@example.com"]
    assert all("password" not in user for user in users)


def test_admin_seed_companies(
    client: TestClient, record_store: InMemoryRecordStore
) -> None:
    response = client.post("/admin/seed/companies", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    data = response.json()
    assert data["succeeded"] == 3
    assert data["failed"] == 0
    assert [outcome["key"] for outcome in data["outcomes"]] == [
        "ABC123",
        "XYZ456",
        "PQR789",
    ]
    assert set(record_store.get_all("companies")) == {"ABC123", "XYZ456", "PQR789"}


def test_admin_seed_customers_creates_logins(
    client: TestClient, record_store: InMemoryRecordStore, identity_provider
) -> None:
    response = client.post("/admin/seed/customers", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    assert response.json()["failed"] == 0
    customers = record_store.get_all("bank_customers")
    assert set(customers) == set(identity_provider.accounts)
    assert all("password" not in document for document in customers.values())


def test_admin_seed_unknown_dataset(client: TestClient) -> None:
    response = client.post("/admin/seed/payroll", headers=ADMIN_HEADERS)

    assert response.status_code == 404
    assert response.json() == {"detail": "Unknown dataset"}


def test_admin_seed_employees_without_csv(
    container: AppContainer, tmp_path: Path
) -> None:
    container.settings = container.settings.model_copy(
        update={"employees_csv_path": tmp_path / "missing.csv"}
    )
    client = TestClient(create_app(container))

    response = client.post("/admin/seed/employees", headers=ADMIN_HEADERS)

    assert response.status_code == 404


def test_admin_seed_requires_token(client: TestClient) -> None:
    response = client.post("/admin/seed/companies")

    assert response.status_code == 401


def test_admin_seed_reports_unreachable_store(
    container: AppContainer, record_store: InMemoryRecordStore
) -> None:
    record_store.set = _unavailable  # type: ignore[method-assign]
    client = TestClient(create_app(container))

    response = client.post("/admin/seed/companies", headers=ADMIN_HEADERS)

    assert response.status_code == 503
    assert response.json() == {"detail": "Record store unavailable"}


def _unavailable(*_args: object) -> None:
    raise StoreUnavailableError("connection refused")


def test_store_bound_routes_run_in_threadpool(container: AppContainer) -> None:
    app = create_app(container)
    endpoints = {
        route.path: route.endpoint
        for route in app.routes
        if isinstance(route, APIRoute)
    }

    for path in (
        "/auth",
        "/auth/signup",
        "/auth/customer",
        "/admin/users",
        "/admin/seed/{dataset}",
    ):
        assert not inspect.iscoroutinefunction(endpoints[path]), path
