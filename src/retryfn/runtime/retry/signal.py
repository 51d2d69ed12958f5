"""What an operation sees and what it answers.

Each attempt the driver calls the operation with a fresh `RetryOp` and expects
one of three answers back:

- `Retry()`: wait per the strategy, then call again
- `Ok(value)`: stop, the call succeeded
- `Err(error)`: stop, the call failed for good
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar, Union

from retryfn.foundation.errors import Err, Ok, Result

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class RetryOp:
    """Attempt context handed to the operation.

    Attributes:
        retries: Attempts already made before this one (0 on the first call)
        total_delay: Seconds waited so far in this retry call
    """

    retries: int = 0
    total_delay: float = 0.0


@dataclass(frozen=True, slots=True)
class Retry:
    """Ask the driver to wait and invoke the operation again."""


RetryResult = Union[Result[T, E], Retry]


__all__ = ["RetryOp", "Retry", "RetryResult", "Ok", "Err"]
