"""Backoff strategies for the retry drivers.

A strategy maps the number of attempts already made to the delay, in seconds,
before the next one. `None` means the attempt budget is exhausted.

- Constant: fixed delay, never exhausts
- ExponentialBackoff: base * factor^attempt, optionally capped
- LinearBackoff: base + increment * attempt, capped
- Immediate: no delay at all
- Schedule: explicit finite list of delays
- Limited: attempt-count cap around any other strategy

Strategies are frozen and hold no iteration state, so one instance can be
shared by any number of concurrent retry calls.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import timedelta
from typing import Protocol, Self, runtime_checkable

Duration = float | timedelta

# Longest wait any strategy yields; fits a 32-bit time_t for time.sleep
MAX_DELAY = float(2**31 - 1)


def to_seconds(duration: Duration) -> float:
    """Normalize a timedelta or number of seconds to float seconds."""
    seconds = duration.total_seconds() if isinstance(duration, timedelta) else float(duration)
    if not (math.isfinite(seconds) and 0 <= seconds <= MAX_DELAY):
        raise ValueError(
            f"duration must be a finite, non-negative number of seconds up to {MAX_DELAY:.0f}, got {duration!r}"
        )
    return seconds


@runtime_checkable
class Backoff(Protocol):
    """Protocol for backoff delay calculation.

    Attempt numbers are 0-indexed: `delay(0)` is the wait after the first call.
    """

    def delay(self, attempt: int) -> float | None:
        """Seconds to wait before the next attempt, or None when exhausted."""
        ...


@dataclass(frozen=True, slots=True)
class Constant:
    """Same delay between every attempt.

    |---|---|---|---|

    Attributes:
        seconds: Delay in seconds
    """

    seconds: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "seconds", to_seconds(self.seconds))

    @classmethod
    def from_duration(cls, duration: Duration) -> Self:
        return cls(to_seconds(duration))

    @classmethod
    def from_millis(cls, millis: float) -> Self:
        return cls(millis / 1000)

    @classmethod
    def from_secs(cls, secs: float) -> Self:
        return cls(secs)

    @classmethod
    def from_micros(cls, micros: float) -> Self:
        return cls(micros / 1_000_000)

    @classmethod
    def from_nanos(cls, nanos: float) -> Self:
        return cls(nanos / 1_000_000_000)

    def delay(self, attempt: int) -> float:
        return self.seconds


@dataclass(frozen=True, slots=True)
class ExponentialBackoff:
    """Exponential backoff, starting at `base` and multiplying by `factor`.

    Delay = min(base * factor^attempt, max_delay)

    With base=2s: 2s, 4s, 8s, 16s, ...  |--|----|--------|

    Attributes:
        base: Delay after the first attempt, in seconds
        factor: Growth factor (default: 2.0)
        max_delay: Optional cap in seconds
    """

    base: float = 1.0
    factor: float = 2.0
    max_delay: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "base", to_seconds(self.base))
        if not (math.isfinite(self.factor) and self.factor >= 1):
            raise ValueError(f"factor must be a finite number >= 1, got {self.factor}")
        if self.max_delay is not None:
            object.__setattr__(self, "max_delay", to_seconds(self.max_delay))

    @classmethod
    def new(cls, base: Duration) -> Self:
        return cls(to_seconds(base))

    @classmethod
    def from_millis(cls, millis: float) -> Self:
        return cls(millis / 1000)

    @classmethod
    def from_secs(cls, secs: float) -> Self:
        return cls(secs)

    @classmethod
    def from_micros(cls, micros: float) -> Self:
        return cls(micros / 1_000_000)

    @classmethod
    def from_nanos(cls, nanos: float) -> Self:
        return cls(nanos / 1_000_000_000)

    def with_factor(self, factor: float) -> Self:
        return replace(self, factor=factor)

    def with_max(self, max_delay: Duration) -> Self:
        return replace(self, max_delay=to_seconds(max_delay))

    def delay(self, attempt: int) -> float:
        if self.base == 0:
            return 0.0
        try:
            d = self.base * (self.factor ** attempt)
        except OverflowError:
            d = MAX_DELAY
        return min(d, MAX_DELAY if self.max_delay is None else self.max_delay)


@dataclass(frozen=True, slots=True)
class LinearBackoff:
    """Linear backoff with cap.

    Delay = min(base + increment * attempt, max_delay)
    """

    base: float = 1.0
    increment: float = 1.0
    max_delay: float = 30.0

    def __post_init__(self) -> None:
        for name in ("base", "increment", "max_delay"):
            object.__setattr__(self, name, to_seconds(getattr(self, name)))

    def delay(self, attempt: int) -> float:
        return min(self.base + (self.increment * attempt), self.max_delay)


@dataclass(frozen=True, slots=True)
class Immediate:
    """Retry without waiting."""

    def delay(self, attempt: int) -> float:
        return 0.0


@dataclass(frozen=True, slots=True)
class Schedule:
    """Explicit, finite list of delays; exhausted once the list runs out.

    Example:
        >>> s = Schedule.of(0.1, 0.5, 2.0)
        >>> [s.delay(n) for n in range(4)]
        [0.1, 0.5, 2.0, None]
    """

    delays: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "delays", tuple(to_seconds(d) for d in self.delays))

    @classmethod
    def of(cls, *delays: Duration) -> Self:
        return cls(tuple(to_seconds(d) for d in delays))

    @classmethod
    def from_iterable(cls, delays: Iterable[Duration]) -> Self:
        return cls(tuple(to_seconds(d) for d in delays))

    def delay(self, attempt: int) -> float | None:
        return self.delays[attempt] if 0 <= attempt < len(self.delays) else None


@dataclass(frozen=True, slots=True)
class Limited:
    """Cap any strategy at `max_retries` waits.

    Example:
        >>> s = Limited(Constant(1.0), max_retries=2)
        >>> [s.delay(n) for n in range(3)]
        [1.0, 1.0, None]
    """

    inner: Backoff
    max_retries: int

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")

    def delay(self, attempt: int) -> float | None:
        return self.inner.delay(attempt) if attempt < self.max_retries else None
