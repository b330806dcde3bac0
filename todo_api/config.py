"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Connection secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - DATABASE_URL, when set, overrides the DB_* parts
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage
    storage_backend: Literal["memory", "sql"] = "memory"

    # Database (sql backend)
    db_driver: str = "postgresql+asyncpg"
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "todo"
    db_pass: str = "todo"
    db_name: str = "todo_db"
    database_url: str | None = None

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """asyncpg needs postgresql+asyncpg:// rather than a bare postgresql://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v or None

    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Server
    host: str = "0.0.0.0"
    port: int = 5555

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def resolved_database_url(self) -> URL | str:
        """DATABASE_URL as given, else a URL assembled with credentials escaped."""
        if self.database_url:
            return self.database_url
        return URL.create(
            drivername=self.db_driver,
            username=self.db_user,
            password=self.db_pass,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
