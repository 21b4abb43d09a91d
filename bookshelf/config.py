"""
Configuration settings for Bookshelf.

Uses Pydantic Settings to load environment variables for logging, the
notification locale, and the defaults used when wiring the catalog wrappers.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Catalog
    locale: Literal["en", "ro"] = Field("en", alias="BOOKSHELF_LOCALE")
    allow_writes: bool = Field(True, alias="BOOKSHELF_ALLOW_WRITES")
    decorator_layers: int = Field(1, ge=1, alias="BOOKSHELF_DECORATOR_LAYERS")

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


__all__ = ["Settings", "get_settings"]
