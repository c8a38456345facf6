"""Errors parts package public surface.

Prefer importing from ``abortable_futures.base.errors`` for the stable surface.
"""

from .error_code import ErrorCode
from .abortable_error import AbortableError
from .classification import classify_exception

__all__ = ["ErrorCode", "AbortableError", "classify_exception"]
