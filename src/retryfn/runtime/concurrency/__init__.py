"""Scheduler backends for the suspending retry driver."""

from __future__ import annotations

from .backends import AsyncioBackend, SleepBackend, TrioBackend, get_backend

__all__ = ["AsyncioBackend", "SleepBackend", "TrioBackend", "get_backend"]
