"""Read-only observer view of a :class:`Deferred`.

A ``Promise`` can register listeners and inspect state but cannot settle the
underlying computation; the resolver keeps that authority.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional, Tuple

from .future_state import FutureState

if TYPE_CHECKING:
    from .deferred import Deferred


class Promise:
    """Observer handle over a deferred's settle/notify events.

    Registration methods return the promise itself so calls can be chained.
    Listeners registered after settlement fire immediately with the settled
    args; progress listeners registered while pending replay the most recent
    notification.
    """

    def __init__(self, deferred: "Deferred") -> None:
        self._deferred = deferred

    def done(self, *callbacks: Callable[..., Any]) -> "Promise":
        self._deferred._listen(FutureState.RESOLVED, callbacks)
        return self

    def fail(self, *callbacks: Callable[..., Any]) -> "Promise":
        self._deferred._listen(FutureState.REJECTED, callbacks)
        return self

    def progress(self, *callbacks: Callable[..., Any]) -> "Promise":
        self._deferred._listen_progress(callbacks)
        return self

    def always(self, *callbacks: Callable[..., Any]) -> "Promise":
        """Register ``callbacks`` for whichever terminal event happens."""
        return self.done(*callbacks).fail(*callbacks)

    def state(self) -> FutureState:
        return self._deferred.state()

    @property
    def args(self) -> Optional[Tuple[Any, ...]]:
        """Settled args, or ``None`` while pending."""
        return self._deferred.args

    @property
    def context(self) -> Any:
        """Context of the last settle or notify call (``None`` before either)."""
        return self._deferred.context

    def promise(self) -> "Promise":
        return self

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"{type(self).__name__}(state={self.state().value}, args={self.args!r})"


__all__ = ["Promise"]
