"""
Configuration settings for record-factory.

Uses Pydantic Settings to load environment variables for logging and for the
registry's duplicate-name policy. Values can also come from a local `.env`.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DuplicateNamePolicy = Literal["overwrite", "reject"]


class Settings(BaseSettings):
    # Logging
    log_level: str = Field("WARNING", alias="RECORD_FACTORY_LOG_LEVEL")
    json_logs: bool = Field(False, alias="RECORD_FACTORY_JSON_LOGS")

    # Registry
    duplicate_names: DuplicateNamePolicy = Field(
        "overwrite", alias="RECORD_FACTORY_DUPLICATE_NAMES"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["DuplicateNamePolicy", "Settings", "get_settings"]
