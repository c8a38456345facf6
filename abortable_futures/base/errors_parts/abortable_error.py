"""
Structured error type raised by the abortable future layer.

Only misuse of the API raises; rejections (including abort-induced ones) flow
through the future's failure callbacks, never as exceptions.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class AbortableError(Exception):
    """Represents a structured error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable message suitable for logging.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.code.value}: {self.message}"


__all__ = ["AbortableError"]
