"""Environment-based configuration using pydantic-settings.

The suspending backend is a process-wide choice, read once and cached:

    RETRYFN_BACKEND=trio
    RETRYFN_LOG_LEVEL=DEBUG
    RETRYFN_LOG_FORMAT=json

Example:
    >>> from retryfn.foundation.config import get_settings
    >>> get_settings().backend
    'asyncio'
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BackendName = Literal["blocking", "asyncio", "trio"]


class LoggingSettings(BaseSettings):
    """Logging configuration.

    Applied on the first log line unless `configure_logging` ran earlier;
    `reset_logging` makes the next line re-read it.
    """

    model_config = SettingsConfigDict(
        env_prefix="RETRYFN_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", "format", mode="before")
    @classmethod
    def _normalize(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v


class RetryfnSettings(BaseSettings):
    """Root settings for retryfn.

    `backend` selects which scheduler `retry_async` suspends on when the caller
    passes no backend explicitly. "blocking" turns the suspending driver off.
    """

    model_config = SettingsConfigDict(
        env_prefix="RETRYFN_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    backend: BackendName = Field(default="asyncio", description="Suspending backend")
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("backend", mode="before")
    @classmethod
    def _normalize_backend(cls, v: str) -> str:
        return v.strip().lower() if isinstance(v, str) else v

    @computed_field
    @property
    def suspending_enabled(self) -> bool:
        return self.backend != "blocking"


@lru_cache(maxsize=1)
def get_settings() -> RetryfnSettings:
    """Get the global settings instance (cached)."""
    return RetryfnSettings()


def clear_settings_cache() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
