"""Error values and exceptions for the retry drivers.

Two kinds of failure leave a driver:
- Error *values* travel inside `Err(...)`: the operation's own error verbatim,
  or `RetryExhausted` when the strategy runs out of delays.
- Exceptions signal misuse of the library (bad signal, missing backend).
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, computed_field


class RetryExhausted(BaseModel):
    """The strategy reported no further delay while the operation asked to retry.

    Attributes:
        tries: Number of operation invocations made, the last one included
        total_delay: Seconds spent waiting between those invocations
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "title": "Retry Exhausted",
            "description": "Backoff strategy ran out of attempts",
            "examples": [{"tries": 4, "total_delay": 3.0}],
        },
    )

    tries: Annotated[int, Field(ge=1, description="Operation invocations made")]
    total_delay: Annotated[float, Field(ge=0.0, description="Seconds waited between attempts")] = 0.0

    @computed_field
    @property
    def message(self) -> str:
        return f"strategy exhausted after {self.tries} tries, total delay {self.total_delay:.3f}s"

    def __str__(self) -> str:
        return self.message


class RetryfnError(Exception):
    """Base class for exceptions raised by retryfn itself."""


class InvalidSignal(RetryfnError, TypeError):
    """An operation returned something other than Retry(), Ok(...) or Err(...)."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"operation must return Retry(), Ok(value) or Err(error), got {type(value).__name__}: {value!r}"
        )


class BackendUnavailable(RetryfnError, RuntimeError):
    """The requested suspending backend is disabled or not installed."""

    def __init__(self, backend: str, reason: str) -> None:
        self.backend = backend
        super().__init__(f"backend {backend!r} unavailable: {reason}")
