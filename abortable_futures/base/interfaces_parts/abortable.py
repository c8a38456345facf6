"""
Protocol for observer handles that carry an abort capability.

Only handles created with ``is_abortable=True`` (and every handle derived by
``then`` or ``join_all``) satisfy it; plain handles simply lack ``abort``.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, runtime_checkable

from .future_like import is_future_like


@runtime_checkable
class Abortable(Protocol):
    """Structural contract for handles exposing ``abort(*args)``."""

    def abort(self, *args: Any) -> Any:  # pragma: no cover - interface
        """Run cleanup, then reject the owning future with ``args``."""
        ...


def abort_target(value: Any) -> Optional[Abortable]:
    """Return the handle carrying the abort capability of ``value``, or ``None``.

    Resolvers are normalized through ``promise()`` first, since the
    capability lives on the observer handle.
    """
    if is_future_like(value):
        value = value.promise()
    if isinstance(value, Abortable) and not isinstance(value, type):
        return value
    return None


def abort_capability(value: Any) -> Optional[Callable[..., Any]]:
    """Return the bound ``abort`` of a future-like value, or ``None``."""
    target = abort_target(value)
    return target.abort if target is not None else None


__all__ = ["Abortable", "abort_target", "abort_capability"]
