"""
Abortable Futures Base Package

Leaf primitives the abortable layer composes over:
- Deferred/Promise/when: synchronous single-settlement futures and their join
- Interfaces: structural ``FutureLike`` / ``Abortable`` contracts
- Errors: normalized error codes and the structured ``AbortableError``
- Cancellation: polling-side ``CancellationToken``
- Logging: structured JSON logging helpers
"""

from .deferred import Deferred, FutureState, Promise, when
from .interfaces import Abortable, FutureLike, abort_capability, is_future_like
from .errors import AbortableError, ErrorCode, classify_exception
from .cancellation import CancellationToken, CancelledError
from .logging import LogContext, configure_logger, get_logger, log_event

__all__ = [
    # Futures
    "Deferred",
    "Promise",
    "FutureState",
    "when",
    # Interfaces
    "FutureLike",
    "Abortable",
    "is_future_like",
    "abort_capability",
    # Errors
    "ErrorCode",
    "AbortableError",
    "classify_exception",
    # Cancellation
    "CancellationToken",
    "CancelledError",
    # Logging
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
