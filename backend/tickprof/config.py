"""Profiler configuration helpers."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings sourced from ``TICKPROF_*`` environment variables."""

    enabled: bool = Field(
        default=True,
        description="Install timing wrappers on the registered host types at startup.",
    )
    gate_accessors: bool = Field(
        default=False,
        description="Only time property getters/setters while a window is open.",
    )
    bank_on_finish: bool = Field(
        default=False,
        description="Add the closing window's ticks to the total before the finish report.",
    )
    state_path: Optional[str] = Field(
        default=None,
        description="JSON file used to persist accumulated statistics between runs.",
    )
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="TICKPROF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
