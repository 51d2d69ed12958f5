"""Suspending backends for `retry_async`.

A backend supplies the one scheduler-specific primitive the suspending driver
needs: suspend the current task for a number of seconds. Everything else in the
retry loop is shared, so asyncio and trio callers see identical behaviour.

Cancellation is the scheduler's own: `asyncio.CancelledError` or
`trio.Cancelled` raised out of `sleep` is never caught here.

Example:
    >>> await retry_async(Constant(0.5), fetch, backend=TrioBackend())
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from retryfn.foundation.config import get_settings
from retryfn.foundation.errors import BackendUnavailable


@runtime_checkable
class SleepBackend(Protocol):
    """Protocol for a cooperative scheduler's timer.

    `retry_async` only calls `sleep`. `name` is informational, so any object
    with an async `sleep(seconds)` can be passed as a backend.
    """

    name: str

    async def sleep(self, seconds: float) -> None:
        """Suspend the calling task for `seconds`, yielding to the scheduler."""
        ...


@dataclass(frozen=True, slots=True)
class AsyncioBackend:
    """Suspend on the running asyncio event loop."""

    name: str = "asyncio"

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)


@dataclass(frozen=True, slots=True)
class TrioBackend:
    """Suspend on the running trio scheduler. Requires the `trio` extra."""

    name: str = "trio"

    def __post_init__(self) -> None:
        _import_trio()

    async def sleep(self, seconds: float) -> None:
        await _import_trio().sleep(seconds)


def _import_trio():  # noqa: ANN202
    try:
        import trio
    except ImportError as e:
        raise BackendUnavailable("trio", "install retryfn[trio]") from e
    return trio


_BACKENDS: dict[str, type[AsyncioBackend] | type[TrioBackend]] = {
    "asyncio": AsyncioBackend,
    "trio": TrioBackend,
}


def get_backend(name: str | None = None) -> SleepBackend:
    """Resolve a backend by name, or from RETRYFN_BACKEND when name is None.

    Raises:
        BackendUnavailable: For "blocking", unknown names, or a missing library
    """
    name = name or get_settings().backend
    if name == "blocking":
        raise BackendUnavailable(name, "suspending driver disabled (RETRYFN_BACKEND=blocking)")
    if (factory := _BACKENDS.get(name)) is None:
        raise BackendUnavailable(name, f"unknown backend, expected one of {sorted(_BACKENDS)}")
    return factory()
