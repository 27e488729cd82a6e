"""Configuration management for expense-tracker.

Uses pydantic-settings to read ``EXPENSES_*`` environment variables once,
at the CLI boundary.  The resolved database URL is then passed explicitly
into the store constructor; nothing below the CLI reads the environment.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DATABASE_NAME: str = "expense"
DATABASE_TEST_NAME: str = "expenses_test"


class Settings(BaseSettings):
    """Runtime settings for the ``expenses`` command."""

    model_config = SettingsConfigDict(
        env_prefix="EXPENSES_",
        extra="ignore",
    )

    env: str = Field(
        default="production",
        description="\"test\" selects the test database; anything else is production",
    )
    database_url: str | None = Field(
        default=None,
        description="SQLAlchemy database URL; overrides env-based selection",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level for diagnostics written to stderr",
    )

    @property
    def database_name(self) -> str:
        return DATABASE_TEST_NAME if self.env == "test" else DATABASE_NAME

    @property
    def resolved_database_url(self) -> str:
        """The explicit URL if configured, else a local PostgreSQL database."""
        if self.database_url:
            return self.database_url
        return f"postgresql:///{self.database_name}"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded on first use."""
    return Settings()
