"""Cancellation error type."""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised (or used as a rejection reason) when work is cancelled cooperatively.

    Distinguishes cancellation from other runtime failures so consumers that
    care can inspect the rejection reason of an aborted future.
    """


__all__ = ["CancelledError"]
