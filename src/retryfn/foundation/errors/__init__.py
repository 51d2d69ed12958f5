"""Error handling for retryfn.

- Result/Ok/Err: monadic results returned by the drivers
- RetryExhausted: error value for a strategy that ran out of delays
- RetryfnError and subclasses: library misuse
"""

from .errors import BackendUnavailable, InvalidSignal, RetryExhausted, RetryfnError
from .result import Err, Ok, Result

__all__ = [
    "Result", "Ok", "Err",
    "RetryExhausted",
    "RetryfnError", "InvalidSignal", "BackendUnavailable",
]
