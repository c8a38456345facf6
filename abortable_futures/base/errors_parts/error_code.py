"""
Normalized error codes for the abortable future layer.

Values are lowercase snake_case and are a stable contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    CANCELLED = "cancelled"
    VALIDATION = "validation"
    UNSUPPORTED = "unsupported"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
