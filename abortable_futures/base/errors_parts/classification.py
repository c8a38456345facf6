"""
Map arbitrary exceptions to normalized :class:`ErrorCode` values.

Used when logging failures raised by user-supplied abort handlers during a
join fan-out.
"""
from __future__ import annotations

from pydantic import ValidationError

from ..cancellation_parts.cancelled_error import CancelledError
from .abortable_error import AbortableError
from .error_code import ErrorCode


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. AbortableError passthrough.
        2. CancelledError -> ``CANCELLED``.
        3. Validation-shaped errors -> ``VALIDATION``.
        4. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, AbortableError):
        return exc.code
    if isinstance(exc, CancelledError):
        return ErrorCode.CANCELLED
    if isinstance(exc, (ValidationError, TypeError, ValueError)):
        return ErrorCode.VALIDATION
    return ErrorCode.UNKNOWN


__all__ = ["classify_exception"]
