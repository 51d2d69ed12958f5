"""Retry drivers: call an operation until it says stop.

Both drivers run the same `RetryLoop`; they differ only in how the operation is
called (plain call vs. await) and how the wait happens (`time.sleep` vs. a
backend's suspending sleep).

Example:
    >>> def fetch(op: RetryOp) -> RetryResult[str, str]:
    ...     if op.retries >= 3:
    ...         return Err("timed out")
    ...     return Retry()
    >>> retry(ExponentialBackoff(2.0), fetch)  # waits 2s, 4s, 8s
    Err('timed out')
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from retryfn.foundation.errors import Err, InvalidSignal, Result, RetryExhausted
from retryfn.runtime.concurrency import SleepBackend, get_backend
from retryfn.runtime.observability import get_logger

from .backoff import Backoff, Immediate
from .signal import Retry, RetryOp, RetryResult

if TYPE_CHECKING:
    from collections.abc import Awaitable

T = TypeVar("T")
E = TypeVar("E")

logger = get_logger("retryfn.retry")


class RetryLoop(Generic[T, E]):
    """State of one retry call, independent of how waiting is done.

    Feed each signal to `advance()`: it returns the final `Result` when the call
    is over, or the number of seconds to wait before calling `op` again.

    Example:
        >>> loop = RetryLoop(Constant(1.0))
        >>> loop.advance(Retry())
        1.0
        >>> loop.op
        RetryOp(retries=1, total_delay=1.0)
        >>> loop.advance(Ok("done"))
        Ok('done')
    """

    __slots__ = ("_strategy", "_op")

    def __init__(self, strategy: Backoff) -> None:
        self._strategy = strategy
        self._op = RetryOp()

    @property
    def op(self) -> RetryOp:
        """Attempt context for the next invocation."""
        return self._op

    def advance(self, signal: RetryResult[T, E]) -> Result[T, E | RetryExhausted] | float:
        """Interpret one signal.

        Raises:
            InvalidSignal: If `signal` is not Retry(), Ok(...) or Err(...)
        """
        if isinstance(signal, Result):
            return signal
        if not isinstance(signal, Retry):
            raise InvalidSignal(signal)

        retries, total = self._op.retries, self._op.total_delay
        delay = self._strategy.delay(retries)
        if delay is None:
            logger.debug("retry exhausted", tries=retries + 1, total_delay=total)
            return Err(RetryExhausted(tries=retries + 1, total_delay=total))

        logger.debug("retry scheduled", retries=retries, delay=delay)
        self._op = RetryOp(retries=retries + 1, total_delay=total + delay)
        return delay


def retry(
    strategy: Backoff,
    operation: Callable[[RetryOp], RetryResult[T, E]],
) -> Result[T, E | RetryExhausted]:
    """Retry a function, blocking the calling thread between attempts.

    Args:
        strategy: Backoff strategy giving the wait after each Retry()
        operation: Called with the attempt context; returns Retry(), Ok or Err

    Returns:
        Ok(value) or Err(error) exactly as the operation returned it, or
        Err(RetryExhausted) if the strategy ran out of delays

    Exceptions raised by `operation` propagate and end the call.
    """
    loop: RetryLoop[T, E] = RetryLoop(strategy)
    while True:
        outcome = loop.advance(operation(loop.op))
        if isinstance(outcome, Result):
            return outcome
        time.sleep(outcome)


def retry_immediate(
    operation: Callable[[RetryOp], RetryResult[T, E]],
) -> Result[T, E | RetryExhausted]:
    """Retry without waiting between attempts."""
    return retry(Immediate(), operation)


async def retry_async(
    strategy: Backoff,
    operation: Callable[[RetryOp], Awaitable[RetryResult[T, E]]],
    *,
    backend: SleepBackend | str | None = None,
) -> Result[T, E | RetryExhausted]:
    """Retry an async function, suspending the task between attempts.

    Same contract as `retry`, except `operation` returns an awaitable and the
    wait goes through `backend` (an object, a name, or None for RETRYFN_BACKEND).

    Cancelling the surrounding task abandons the call at whichever await it is
    suspended in; no further attempts are made and no result is produced.

    Raises:
        BackendUnavailable: If the backend is disabled or not installed
    """
    sleeper = get_backend(backend) if backend is None or isinstance(backend, str) else backend
    loop: RetryLoop[T, E] = RetryLoop(strategy)
    while True:
        outcome = loop.advance(await operation(loop.op))
        if isinstance(outcome, Result):
            return outcome
        await sleeper.sleep(outcome)


async def retry_async_immediate(
    operation: Callable[[RetryOp], Awaitable[RetryResult[T, E]]],
    *,
    backend: SleepBackend | str | None = None,
) -> Result[T, E | RetryExhausted]:
    """Async retry with zero delay; still yields to the scheduler between attempts."""
    return await retry_async(Immediate(), operation, backend=backend)
