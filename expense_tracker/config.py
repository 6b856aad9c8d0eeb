"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - All credentials come from environment variables or .env (never hardcoded in code paths)
    - get_settings() is cached (lru_cache) - single instance per process
    - DATABASE_URL, when set, wins over the DB_HOST/DB_USER/... parts

Design Decisions:
    - Values come from the environment, then an optional .env file
    - DB_HOST/DB_USER/DB_PASSWORD/DB_NAME/DB_PORT assemble the URL when DATABASE_URL is unset
    - EXPENSE_DATE_DEFAULT selects the one date-default policy for the process
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from expense_tracker.core.domain_types import DateDefault


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    db_host: str = "localhost"
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_name: str = "expenses"
    db_port: int = 5432
    database_url: str | None = None

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Plain postgresql:// URLs need the asyncpg driver spelled out."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_auto_migrate: bool = True

    # Expenses
    expense_date_default: DateDefault = DateDefault.UNSET

    # API
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 8000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def resolved_database_url(self) -> str:
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
