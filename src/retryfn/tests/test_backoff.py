"""Tests for backoff strategies."""

from __future__ import annotations

import math
from datetime import timedelta

import pytest

from retryfn.runtime.retry import (
    Backoff,
    Constant,
    ExponentialBackoff,
    Immediate,
    MAX_DELAY,
    Limited,
    LinearBackoff,
    Schedule,
    to_seconds,
)


@pytest.mark.parametrize("attempt", [0, 1, 2, 10, 1000])
def test_constant_never_changes(attempt: int) -> None:
    assert Constant.from_millis(100).delay(attempt) == pytest.approx(0.1)
    assert Constant.from_secs(1).delay(attempt) == 1.0


def test_constant_from_duration() -> None:
    assert Constant.from_duration(timedelta(milliseconds=250)).delay(0) == 0.25
    assert Constant.from_duration(3).delay(5) == 3.0
    assert Constant(timedelta(seconds=2)).seconds == 2.0  # type: ignore[arg-type]


def test_exponential_doubles_from_base() -> None:
    s = ExponentialBackoff.new(timedelta(seconds=2))
    assert [s.delay(n) for n in range(3)] == [2.0, 4.0, 8.0]


def test_exponential_from_millis() -> None:
    s = ExponentialBackoff.from_millis(100)
    assert [s.delay(n) for n in range(3)] == pytest.approx([0.1, 0.2, 0.4])


def test_exponential_custom_factor() -> None:
    s = ExponentialBackoff.from_millis(100).with_factor(10)
    assert [s.delay(n) for n in range(4)] == pytest.approx([0.1, 1.0, 10.0, 100.0])


def test_exponential_hits_max() -> None:
    s = ExponentialBackoff.from_millis(100).with_factor(10).with_max(timedelta(seconds=1000))
    assert [s.delay(n) for n in range(7)] == pytest.approx([0.1, 1.0, 10.0, 100.0, 1000.0, 1000.0, 1000.0])


def test_exponential_overflow_is_capped() -> None:
    assert ExponentialBackoff(1.0).delay(5000) == MAX_DELAY
    assert ExponentialBackoff(1.0).delay(40) == MAX_DELAY
    assert math.isfinite(ExponentialBackoff(1.0, factor=10.0).delay(10_000))
    assert ExponentialBackoff(1.0, max_delay=60.0).delay(5000) == 60.0
    assert ExponentialBackoff(0.0).delay(5000) == 0.0


def test_exponential_is_pure() -> None:
    s = ExponentialBackoff(2.0)
    assert s.delay(2) == 8.0
    assert s.delay(0) == 2.0
    assert s.delay(2) == 8.0


def test_linear_backoff() -> None:
    s = LinearBackoff(base=1.0, increment=0.5, max_delay=2.0)
    assert [s.delay(n) for n in range(4)] == [1.0, 1.5, 2.0, 2.0]


def test_immediate() -> None:
    assert Immediate().delay(0) == 0.0
    assert Immediate().delay(99) == 0.0


def test_schedule_exhausts() -> None:
    s = Schedule.of(0.1, timedelta(seconds=1), 5)
    assert [s.delay(n) for n in range(4)] == [0.1, 1.0, 5.0, None]
    assert Schedule.from_iterable([]).delay(0) is None


def test_limited_wraps_any_strategy() -> None:
    s = Limited(ExponentialBackoff(1.0), max_retries=3)
    assert [s.delay(n) for n in range(5)] == [1.0, 2.0, 4.0, None, None]
    assert Limited(Constant(1.0), max_retries=0).delay(0) is None


def test_all_strategies_satisfy_protocol() -> None:
    for s in (Constant(), ExponentialBackoff(), LinearBackoff(), Immediate(), Schedule(), Limited(Immediate(), 1)):
        assert isinstance(s, Backoff)


def test_strategies_are_frozen() -> None:
    s = Constant(1.0)
    with pytest.raises(AttributeError):
        s.seconds = 2.0  # type: ignore[misc]


@pytest.mark.parametrize(
    "bad", [-1, float("nan"), math.inf, MAX_DELAY * 2, timedelta(seconds=-1), timedelta(days=1_000_000)]
)
def test_negative_durations_rejected(bad: float | timedelta) -> None:
    with pytest.raises(ValueError, match="non-negative"):
        to_seconds(bad)
    with pytest.raises(ValueError):
        Constant(bad)  # type: ignore[arg-type]


def test_invalid_parameters_rejected() -> None:
    with pytest.raises(ValueError, match="factor"):
        ExponentialBackoff(1.0, factor=0.5)
    with pytest.raises(ValueError, match="factor"):
        ExponentialBackoff(1.0, factor=float("nan"))
    with pytest.raises(ValueError, match="factor"):
        ExponentialBackoff(1.0).with_factor(math.inf)
    with pytest.raises(ValueError):
        ExponentialBackoff(math.inf)
    with pytest.raises(ValueError):
        ExponentialBackoff(1.0).with_max(math.inf)
    with pytest.raises(ValueError):
        LinearBackoff(base=1.0, increment=math.inf)
    with pytest.raises(ValueError):
        Schedule.of(1.0, math.inf)
    with pytest.raises(ValueError, match="max_retries"):
        Limited(Constant(), max_retries=-1)


def test_sub_millisecond_constructors() -> None:
    assert Constant.from_micros(1500).delay(0) == pytest.approx(0.0015)
    assert Constant.from_nanos(2_000_000).delay(3) == pytest.approx(0.002)
    s = ExponentialBackoff.from_micros(100)
    assert [s.delay(n) for n in range(3)] == pytest.approx([0.0001, 0.0002, 0.0004])
    assert ExponentialBackoff.from_nanos(500).delay(1) == pytest.approx(1e-6)
