"""Configuration management using pydantic-settings."""

from .settings import (
    BackendName,
    LoggingSettings,
    RetryfnSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "BackendName",
    "LoggingSettings",
    "RetryfnSettings",
    "clear_settings_cache",
    "get_settings",
]
