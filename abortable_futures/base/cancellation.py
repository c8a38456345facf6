"""Cooperative cancellation primitives (public API facade).

- ``CancellationToken`` lets long-running work poll for cancellation and
  notifies registered callbacks when it is cancelled.
- ``CancelledError`` is raised by work that observes a cancellation request
  and is the rejection reason used when a token aborts a future.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken", "CancelledError"]
