"""Foundation layer: errors, results and configuration."""

from .config import RetryfnSettings, clear_settings_cache, get_settings
from .errors import BackendUnavailable, Err, InvalidSignal, Ok, Result, RetryExhausted, RetryfnError

__all__ = [
    "RetryfnSettings", "clear_settings_cache", "get_settings",
    "Result", "Ok", "Err", "RetryExhausted",
    "RetryfnError", "InvalidSignal", "BackendUnavailable",
]
