"""Shared fixtures for retryfn tests."""

from __future__ import annotations

import pytest

from retryfn.foundation.config import clear_settings_cache
from retryfn.runtime.observability import reset_logging

from .helpers import RecordingBackend, SleepRecorder


@pytest.fixture
def sleeps(monkeypatch: pytest.MonkeyPatch) -> SleepRecorder:
    """Patch time.sleep for the blocking driver."""
    recorder = SleepRecorder()
    monkeypatch.setattr("time.sleep", recorder)
    return recorder


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> object:
    """Isolate tests from RETRYFN_* variables, cached settings and logging state."""
    for var in ("RETRYFN_BACKEND", "RETRYFN_LOG_LEVEL", "RETRYFN_LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    clear_settings_cache()
    reset_logging()
    yield
    clear_settings_cache()
    reset_logging()
