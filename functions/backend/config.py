"""
Configuration and settings for the LeafLine functions.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings, read from `PLANT_CARE_*` variables."""

    model_config = SettingsConfigDict(
        env_prefix="PLANT_CARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Development toggles
    use_in_memory_store: bool = Field(default=False)

    # When set, reactors with a failed write step raise so the dispatcher
    # redelivers the event. Otherwise failures are logged and swallowed.
    retry_failed_reactions: bool = Field(default=False)

    # Memory for the callables, in MB.
    memory_mb: int = Field(default=256)

    @property
    def in_memory(self) -> bool:
        return (
            self.use_in_memory_store
            or os.environ.get("FUNCTION_RUN_MODE") == "testing"
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
