"""Tests for the user directory service."""

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

import pytest

from query_portal.adapters.in_memory_record_store import InMemoryRecordStore
from query_portal.domain.errors import (
    EmailAlreadyExistsError,
    ErrorKind,
    InvalidCredentialsError,
    StoreUnavailableError,
    ValidationError,
)
from query_portal.services.records import Document
from query_portal.services.users import UserDirectoryService


@dataclass
class InterleavingRecordStore(InMemoryRecordStore):
    """Holds every reader of the full user set until two have read it."""

    barrier: threading.Barrier = field(default_factory=lambda: threading.Barrier(2))

    def get_all(self, collection: str) -> dict[str, Document]:
        documents = super().get_all(collection)
        self.barrier.wait(timeout=5)
        return documents


@dataclass
class UnavailableRecordStore(InMemoryRecordStore):
    def create_if_absent(self, collection: str, key: str, document: Document) -> bool:
        raise StoreUnavailableError("disk full")


def test_register_returns_profile_without_password(
    user_directory: UserDirectoryService, record_store: InMemoryRecordStore
) -> None:
    profile = user_directory.register("Ada", "ada@example.com", "secret1")

    assert profile.email == "ada@example.com"
    assert profile.name == "Ada"
    assert profile.id
    assert profile.created_at
    assert not hasattr(profile, "password")
    assert set(profile.to_dict()) == {"id", "name", "email", "createdAt"}
    stored = record_store.get("users", "ada@example.com")
    assert stored is not None
    assert stored["password"] == "secret1"
    assert stored["id"] == profile.id


def test_register_rejects_duplicate_email(
    user_directory: UserDirectoryService, record_store: InMemoryRecordStore
) -> None:
    user_directory.register("Ada", "ada@example.com", "secret1")

    with pytest.raises(EmailAlreadyExistsError) as excinfo:
        user_directory.register("Other", "ada@example.com", "secret2")

    assert excinfo.value.kind is ErrorKind.EMAIL_ALREADY_EXISTS
    users = record_store.get_all("users")
    assert [doc["email"] for doc in users.values()] == ["ada@example.com"]
    assert users["ada@example.com"]["name"] == "Ada"


def test_register_treats_email_case_sensitively(
    user_directory: UserDirectoryService,
) -> None:
    user_directory.register("Ada", "ada@example.com", "secret1")

    profile = user_directory.register("Ada", "Ada@example.com", "secret1")

    assert profile.email == "Ada@example.com"


def test_register_validates_before_touching_store(
    user_directory: UserDirectoryService, record_store: InMemoryRecordStore
) -> None:
    with pytest.raises(ValidationError):
        user_directory.register("Ada", "ada@example.com", "short")

    assert record_store.get_all("users") == {}


def test_register_propagates_store_failures() -> None:
    directory = UserDirectoryService(UnavailableRecordStore())

    with pytest.raises(StoreUnavailableError):
        directory.register("Ada", "ada@example.com", "secret1")


def test_authenticate_returns_profile(user_directory: UserDirectoryService) -> None:
    registered = user_directory.register("Ada", "ada@example.com", "secret1")

    profile = user_directory.authenticate("ada@example.com", "secret1")

    assert profile == registered
    assert "password" not in profile.to_dict()


def test_authenticate_does_not_reveal_which_part_was_wrong(
    user_directory: UserDirectoryService,
) -> None:
    user_directory.register("Ada", "ada@example.com", "secret1")

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        user_directory.authenticate("ada@example.com", "wrong-password")
    with pytest.raises(InvalidCredentialsError) as unknown_email:
        user_directory.authenticate("nobody@example.com", "secret1")

    assert wrong_password.value.kind == unknown_email.value.kind
    assert wrong_password.value.message == unknown_email.value.message
    assert str(wrong_password.value) == "Invalid credentials"
    assert str(unknown_email.value) == "Invalid credentials"


def test_authenticate_requires_both_fields(
    user_directory: UserDirectoryService,
) -> None:
    with pytest.raises(ValidationError) as excinfo:
        user_directory.authenticate("ada@example.com", "")

    assert excinfo.value.kind is ErrorKind.MISSING_FIELD


def test_concurrent_registrations_with_distinct_emails_both_persist() -> None:
    store = InterleavingRecordStore()
    directory = UserDirectoryService(store)

    with ThreadPoolExecutor(max_workers=2) as pool:
        first = pool.submit(directory.register, "Ada", "ada@example.com", "secret1")
        second = pool.submit(directory.register, "Bob", "bob@example.com", "secret2")
        profiles = [first.result(timeout=10), second.result(timeout=10)]

    assert {profile.email for profile in profiles} == {
        "ada@example.com",
        "bob@example.com",
    }
    assert set(store.collections["users"]) == {"ada@example.com", "bob@example.com"}


def test_concurrent_registrations_with_same_email_keep_one_record() -> None:
    store = InterleavingRecordStore()
    directory = UserDirectoryService(store)

    with ThreadPoolExecutor(max_workers=2) as pool:
        futures = [
            pool.submit(directory.register, name, "ada@example.com", "secret1")
            for name in ("Ada", "Imposter")
        ]
        results = []
        for future in futures:
            try:
                results.append(future.result(timeout=10))
            except EmailAlreadyExistsError as exc:
                results.append(exc)

    assert sum(isinstance(result, EmailAlreadyExistsError) for result in results) == 1
    assert list(store.collections["users"]) == ["ada@example.com"]


def test_list_profiles_orders_by_creation(
    user_directory: UserDirectoryService,
) -> None:
    user_directory.register("Ada", "ada@example.com", "secret1")
    user_directory.register("Bob", "bob@example.com", "secret2")

    profiles = user_directory.list_profiles()

    assert [profile.email for profile in profiles] == [
        "ada@example.com",
        "bob@example.com",
    ]
