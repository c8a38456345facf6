"""Structural interfaces (public API facade).

``FutureLike`` marks values the chain operator treats as nested futures;
``Abortable`` marks handles exposing an abort capability.
"""

from .interfaces_parts.future_like import FutureLike, is_future_like
from .interfaces_parts.abortable import Abortable, abort_capability, abort_target

__all__ = ["FutureLike", "is_future_like", "Abortable", "abort_capability", "abort_target"]
