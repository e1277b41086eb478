"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from query_portal.adapters.in_memory_record_store import InMemoryRecordStore
from query_portal.config import Settings
from query_portal.containers import AppContainer
from query_portal.services.customers import CustomerAccessService
from query_portal.services.identity import IdentityAlreadyExistsError, IdentityProvider
from query_portal.services.ingestion import SeedIngestionRunner
from query_portal.services.records import Document
from query_portal.services.session_cache import LocalStorage
from query_portal.services.users import UserDirectoryService


@dataclass
class InMemoryLocalStorage(LocalStorage):
    """In-memory local storage for tests."""

    items: dict[str, str] = field(default_factory=dict)

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


@dataclass
class FakeIdentityProvider(IdentityProvider):
    """Identity provider that records created accounts."""

    accounts: dict[str, str] = field(default_factory=dict)

    def create_user(self, email: str, password: str, display_name: str) -> str:
        if email in self.accounts:
            raise IdentityAlreadyExistsError(email)
        self.accounts[email] = password
        return f"uid-{len(self.accounts)}"


@dataclass
class FailingRecordStore(InMemoryRecordStore):
    """Record store that rejects writes for selected keys."""

    failing_keys: set[str] = field(default_factory=set)

    def set(self, collection: str, key: str, document: Document) -> None:
        if key in self.failing_keys:
            raise RuntimeError(f"write rejected for {key}")
        super().set(collection, key, document)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        record_store="memory",
        admin_token="admin-token",
        session_cache_path=None,
    )


@pytest.fixture
def record_store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def user_directory(record_store: InMemoryRecordStore) -> UserDirectoryService:
    return UserDirectoryService(record_store)


@pytest.fixture
def identity_provider() -> FakeIdentityProvider:
    return FakeIdentityProvider()


@pytest.fixture
def container(
    settings: Settings,
    record_store: InMemoryRecordStore,
    user_directory: UserDirectoryService,
    identity_provider: FakeIdentityProvider,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        record_store=record_store,
        user_directory=user_directory,
        customer_access=CustomerAccessService(record_store),
        seed_runner=SeedIngestionRunner(record_store, identity_provider),
    )
