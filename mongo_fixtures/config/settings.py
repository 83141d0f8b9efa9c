"""Environment settings for the mongo-fixtures command line.

The library API takes explicit arguments; these settings only supply
defaults for the CLI. Every field can be set through an environment variable
prefixed with MONGO_FIXTURES_ (e.g. MONGO_FIXTURES_URI) or a .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mongo_fixtures.config.constants import DEFAULT_FIXTURES_DIR
from mongo_fixtures.protocols.types import FixtureSet

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class FixtureSettings(BaseSettings):
    """Fixture loader settings."""

    model_config = SettingsConfigDict(
        env_prefix="MONGO_FIXTURES_",
        env_file=".env",
        extra="ignore",
    )

    # =========================================================================
    # DATABASE
    # =========================================================================
    uri: Optional[str] = Field(
        default=None,
        description="MongoDB connection string (e.g., mongodb://localhost:27017/test)"
    )
    db_name: Optional[str] = Field(
        default=None,
        description="Database name; defaults to the one in the URI"
    )

    # =========================================================================
    # FIXTURES
    # =========================================================================
    dir: str = DEFAULT_FIXTURES_DIR
    filter: Optional[str] = None

    # =========================================================================
    # LOGGING
    # =========================================================================
    mute: bool = False
    log_level: str = "INFO"
    json_logs: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    def to_fixture_set(self) -> FixtureSet:
        """Build the FixtureSet described by these settings."""
        return FixtureSet(directory=self.dir, filter=self.filter, mute=self.mute)


@lru_cache
def get_settings() -> FixtureSettings:
    """Return the process-wide settings instance."""
    return FixtureSettings()


__all__ = [
    "LOG_LEVELS",
    "FixtureSettings",
    "get_settings",
]
