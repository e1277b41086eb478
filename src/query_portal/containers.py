"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from query_portal.adapters.in_memory_record_store import InMemoryRecordStore
from query_portal.adapters.json_file_record_store import JsonFileRecordStore
from query_portal.adapters.supabase_identity_provider import SupabaseIdentityProvider
from query_portal.adapters.supabase_record_store import SupabaseRecordStore
from query_portal.config import Settings
from query_portal.services.customers import CustomerAccessService
from query_portal.services.identity import DirectoryIdentityProvider, IdentityProvider
from query_portal.services.ingestion import SeedIngestionRunner
from query_portal.services.records import RecordStore
from query_portal.services.users import UserDirectoryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    record_store: RecordStore
    user_directory: UserDirectoryService
    customer_access: CustomerAccessService
    seed_runner: SeedIngestionRunner


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    record_store: RecordStore
    if resolved_settings.record_store == "supabase":
        supabase_client = create_client(
            resolved_settings.supabase_url, resolved_settings.supabase_service_key
        )
        record_store = SupabaseRecordStore(supabase_client)
    elif resolved_settings.record_store == "memory":
        record_store = InMemoryRecordStore()
    else:
        record_store = JsonFileRecordStore(resolved_settings.data_dir)

    user_directory = UserDirectoryService(
        record_store, collection=resolved_settings.users_collection
    )
    identity_provider: IdentityProvider
    if resolved_settings.record_store == "supabase":
        identity_provider = SupabaseIdentityProvider(supabase_client)
    else:
        identity_provider = DirectoryIdentityProvider(user_directory)

    return AppContainer(
        settings=resolved_settings,
        record_store=record_store,
        user_directory=user_directory,
        customer_access=CustomerAccessService(record_store),
        seed_runner=SeedIngestionRunner(record_store, identity_provider),
    )
