"""Tests for settings, error values and structured logging."""

from __future__ import annotations

import io

import orjson
import pytest
from pydantic import ValidationError

from retryfn import InvalidSignal, RetryExhausted, RetryfnError, get_settings
from retryfn.foundation.config import RetryfnSettings
from retryfn.runtime.observability import (
    BoundLogger,
    JsonRenderer,
    NoOpRenderer,
    configure_from_settings,
    configure_logging,
    get_logger,
    log_context,
)


def test_default_settings() -> None:
    settings = get_settings()
    assert settings.backend == "asyncio"
    assert settings.suspending_enabled
    assert settings.logging.level == "INFO"
    assert get_settings() is settings


def test_backend_from_env_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RETRYFN_BACKEND", " Blocking ")
    settings = RetryfnSettings()
    assert settings.backend == "blocking"
    assert not settings.suspending_enabled


def test_invalid_backend_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RETRYFN_BACKEND", "gevent")
    with pytest.raises(ValidationError):
        RetryfnSettings()


def test_log_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RETRYFN_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("RETRYFN_LOG_FORMAT", "none")
    settings = get_settings()
    assert settings.logging.level == "DEBUG"
    assert isinstance(configure_from_settings(settings), NoOpRenderer)


def test_retry_exhausted_model() -> None:
    exhausted = RetryExhausted(tries=4, total_delay=3.0)
    assert exhausted.message == "strategy exhausted after 4 tries, total delay 3.000s"
    assert exhausted.model_dump()["message"] == exhausted.message
    with pytest.raises(ValidationError):
        RetryExhausted(tries=0)
    with pytest.raises(ValidationError):
        exhausted.tries = 5  # type: ignore[misc]


def test_invalid_signal_is_type_error() -> None:
    err = InvalidSignal(42)
    assert isinstance(err, TypeError)
    assert isinstance(err, RetryfnError)
    assert err.value == 42


def test_json_renderer() -> None:
    out = io.StringIO()
    log = BoundLogger(context={"logger": "test"}, _renderer=JsonRenderer(output=out), _level=10)
    log.bind(job="sync").debug("retry scheduled", retries=1, delay=0.5)

    record = orjson.loads(out.getvalue())
    assert record["event"] == "retry scheduled"
    assert record["level"] == "debug"
    assert record["job"] == "sync"
    assert record["delay"] == 0.5


def test_level_filtering_and_context() -> None:
    out = io.StringIO()
    configure_logging(format="console", level="WARNING", output=out)
    log = get_logger("retryfn.test")

    log.info("hidden")
    with log_context(request_id="abc"):
        log.warning("shown")
    log.error("after")

    lines = out.getvalue().splitlines()
    assert len(lines) == 2
    assert "[warning] shown" in lines[0] and "request_id='abc'" in lines[0]
    assert "request_id" not in lines[1]


def test_unknown_log_format() -> None:
    with pytest.raises(ValueError, match="Unknown format"):
        configure_logging(format="xml")
