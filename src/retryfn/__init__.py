"""retryfn - retry a function with blocking or suspending waits.

Sync:
    >>> from retryfn import retry, Retry, Err, ExponentialBackoff
    >>> count = 0
    >>> def op(ctx):
    ...     global count
    ...     if ctx.retries >= 3:
    ...         return Err("timed out")
    ...     count += 1
    ...     return Retry()
    >>> retry(ExponentialBackoff.from_secs(2), op)  # waits 2s, 4s, 8s
    Err('timed out')

Async (asyncio by default, trio with RETRYFN_BACKEND=trio or backend="trio"):
    >>> async def op(ctx):
    ...     return Ok(await fetch()) if ctx.retries else Retry()
    >>> await retry_async(Constant.from_millis(100), op)
"""

from __future__ import annotations

__version__ = "0.3.0"

from .foundation.config import RetryfnSettings, clear_settings_cache, get_settings
from .foundation.errors import BackendUnavailable, InvalidSignal, Result, RetryExhausted, RetryfnError
from .runtime.concurrency import AsyncioBackend, SleepBackend, TrioBackend, get_backend
from .runtime.observability import configure_logging, get_logger
from .runtime.retry import (
    Backoff,
    Constant,
    Err,
    ExponentialBackoff,
    Immediate,
    Limited,
    LinearBackoff,
    MAX_DELAY,
    Ok,
    Retry,
    RetryLoop,
    RetryOp,
    RetryResult,
    Schedule,
    retry,
    retry_async,
    retry_async_immediate,
    retry_immediate,
)

__all__ = [
    "__version__",
    # Drivers
    "retry", "retry_immediate", "retry_async", "retry_async_immediate", "RetryLoop",
    # Signals & results
    "RetryOp", "RetryResult", "Retry", "Ok", "Err", "Result",
    # Strategies
    "Backoff", "Constant", "ExponentialBackoff", "LinearBackoff", "Immediate", "Schedule", "Limited", "MAX_DELAY",
    # Backends
    "SleepBackend", "AsyncioBackend", "TrioBackend", "get_backend",
    # Errors
    "RetryExhausted", "RetryfnError", "InvalidSignal", "BackendUnavailable",
    # Config & logging
    "RetryfnSettings", "get_settings", "clear_settings_cache", "configure_logging", "get_logger",
]
