"""
Protocol for values that behave like a pending/settled computation handle.

Continuations may return either a plain value or a ``FutureLike``; the chain
operator tells them apart with ``isinstance(value, FutureLike)`` (structural
interface satisfaction) instead of probing attribute shapes ad hoc.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class FutureLike(Protocol):
    """Structural contract for observable futures (deferreds and their promises)."""

    def promise(self) -> "FutureLike":  # pragma: no cover - interface
        """Return the read-only observer handle for this future."""
        ...

    def done(self, *callbacks: Callable[..., Any]) -> "FutureLike":  # pragma: no cover - interface
        """Register resolve listeners."""
        ...

    def fail(self, *callbacks: Callable[..., Any]) -> "FutureLike":  # pragma: no cover - interface
        """Register reject listeners."""
        ...

    def progress(self, *callbacks: Callable[..., Any]) -> "FutureLike":  # pragma: no cover - interface
        """Register progress listeners."""
        ...


def is_future_like(value: Any) -> bool:
    """Return True when ``value`` satisfies :class:`FutureLike`.

    Classes are excluded: a class object exposing these names as plain
    functions is not a live computation.
    """
    return not isinstance(value, type) and isinstance(value, FutureLike)


__all__ = ["FutureLike", "is_future_like"]
