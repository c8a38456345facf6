"""Cooperative cancellation token.

A token is the polling-side counterpart of an abortable future: long-running
work checks ``raise_if_cancelled`` while the future's ``on_abort`` cleanup
cancels the token (see ``cancel_on_abort``).
"""

from __future__ import annotations

from threading import Lock
from typing import Callable, List, Optional

from .cancelled_error import CancelledError
from .state import State


class CancellationToken:
    """A cooperative cancellation token with cascading children and callbacks.

    Cancelling is idempotent: the first reason wins, children and callbacks
    are notified once. Callbacks registered after cancellation fire
    immediately.
    """

    def __init__(self, *, parent: "CancellationToken | None" = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._children: List[CancellationToken] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:
        """Whether cancellation has been requested."""
        return self._state.cancelled

    @property
    def reason(self) -> str | None:
        """Reason supplied at cancel time (if any)."""
        return self._state.reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation, cascade to children, then run callbacks."""
        with self._lock:
            if self._state.cancelled:
                return
            self._state.cancelled = True
            self._state.reason = reason
            children = list(self._children)
            callbacks = list(self._state.callbacks)
            self._state.callbacks.clear()
        for child in children:
            child.cancel(reason)
        for cb in callbacks:
            cb(reason)

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Link a child token so parent cancellation cascades (returns child)."""
        with self._lock:
            self._children.append(token)
            should_cancel = self._state.cancelled
            reason = self._state.reason
        if should_cancel:
            token.cancel(reason)
        return token

    def on_cancel(self, callback: Callable[[Optional[str]], None]) -> None:
        """Run ``callback(reason)`` on cancellation (immediately if already cancelled)."""
        with self._lock:
            if not self._state.cancelled:
                self._state.callbacks.append(callback)
                return
            reason = self._state.reason
        callback(reason)

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` if the token is cancelled."""
        if self._state.cancelled:
            raise CancelledError(self._state.reason or "operation cancelled")

    def child(self) -> "CancellationToken":
        """Create and link a child token (shortcut)."""
        return CancellationToken(parent=self)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"CancellationToken(cancelled={self._state.cancelled}, "
            f"reason={self._state.reason!r}, children={len(self._children)})"
        )


__all__ = ["CancellationToken"]
