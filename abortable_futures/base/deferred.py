"""Base future primitives (public API facade).

- ``Deferred``: resolver with ``resolve``/``reject``/``notify`` (and the
  ``*_with`` variants carrying an explicit context).
- ``Promise``: read-only observer with ``done``/``fail``/``progress``.
- ``when``: all-of-N join.
- ``FutureState``: lifecycle enum.
"""

from .deferred_parts.future_state import FutureState
from .deferred_parts.deferred import Deferred
from .deferred_parts.promise import Promise
from .deferred_parts.when import when

__all__ = ["FutureState", "Deferred", "Promise", "when"]
