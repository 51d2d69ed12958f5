"""Test doubles for the retry drivers."""

from __future__ import annotations

import asyncio


class SleepRecorder:
    """Stand-in for time.sleep that records instead of blocking."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


class RecordingBackend:
    """Suspending backend that records waits and only yields to the loop."""

    name = "recording"

    def __init__(self) -> None:
        self.calls: list[float] = []

    async def sleep(self, seconds: float) -> None:
        self.calls.append(seconds)
        await asyncio.sleep(0)
