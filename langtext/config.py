"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheSettings(BaseModel):
    max_size: int = Field(
        default=0,
        ge=0,
        description="Largest number of headers kept in the cache; 0 disables eviction.",
    )
    min_size: int | None = Field(
        default=None,
        ge=0,
        description="Entries retained after a purge; defaults to max_size.",
    )
    purge_delay_seconds: float = Field(default=0.01, gt=0, le=10)

    @model_validator(mode="after")
    def _cap_min_size(self) -> "CacheSettings":
        if self.min_size is not None and self.max_size and self.min_size > self.max_size:
            self.min_size = self.max_size
        return self


class LanguageSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LANGTEXT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    source_path: Path = Path("language.yaml")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    cache: CacheSettings = Field(default_factory=CacheSettings)


@lru_cache
def get_settings() -> LanguageSettings:
    """Return cached settings instance."""

    return LanguageSettings()


__all__ = [
    "CacheSettings",
    "LanguageSettings",
    "get_settings",
]
