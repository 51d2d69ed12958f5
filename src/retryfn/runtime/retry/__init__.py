"""Retry drivers and backoff strategies.

Example:
    >>> from retryfn.runtime.retry import retry, Retry, Ok, Err, ExponentialBackoff
    >>> def op(ctx):
    ...     return Ok("done") if ctx.retries == 2 else Retry()
    >>> retry(ExponentialBackoff.from_millis(10), op)
    Ok('done')
"""

from .backoff import (
    Backoff,
    Constant,
    Duration,
    ExponentialBackoff,
    Immediate,
    Limited,
    MAX_DELAY,
    LinearBackoff,
    Schedule,
    to_seconds,
)
from .driver import RetryLoop, retry, retry_async, retry_async_immediate, retry_immediate
from .signal import Err, Ok, Retry, RetryOp, RetryResult

__all__ = [
    # Backoff strategies
    "Backoff",
    "Constant",
    "ExponentialBackoff",
    "LinearBackoff",
    "Immediate",
    "Schedule",
    "Limited",
    "Duration",
    "MAX_DELAY",
    "to_seconds",
    # Signals
    "RetryOp",
    "RetryResult",
    "Retry",
    "Ok",
    "Err",
    # Drivers
    "RetryLoop",
    "retry",
    "retry_immediate",
    "retry_async",
    "retry_async_immediate",
]
