"""Application configuration."""

import os
from pathlib import Path
from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    record_store: Literal["json", "supabase", "memory"] = "json"
    data_dir: Path = Path("data")
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    admin_token: str | None = None
    users_collection: str = "users"
    employees_csv_path: Path = Path("employees_cleaned.csv")
    session_cache_path: Path | None = Path.home() / ".query_portal" / "storage.json"
    api_base_url: str = "http://localhost:8000"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @model_validator(mode="after")
    def _require_supabase_credentials(self) -> "Settings":
        if self.record_store == "supabase" and not (
            self.supabase_url and self.supabase_service_key
        ):
            raise ValueError(
                "SUPABASE_URL and SUPABASE_SERVICE_KEY are required "
                "when RECORD_STORE=supabase"
            )
        return self
