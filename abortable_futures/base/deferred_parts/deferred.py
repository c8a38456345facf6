"""Synchronous resolver for a single-settlement computation.

``Deferred`` holds the authority to settle a future (resolve, reject) and to
emit progress notifications. Observers get a :class:`Promise` via
:meth:`Deferred.promise`. Listeners run synchronously, in registration order,
and have all run before the outermost settling call returns. Settlements
triggered from inside a listener are queued behind the current batch (see
:mod:`.listener_queue`), so long chains never deepen the stack. A listener
exception does not stop the remaining listeners; the first one propagates to
the outermost caller.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .future_state import FutureState
from .listener_queue import dispatch
from .promise import Promise

Callback = Callable[..., Any]


class Deferred:
    """Resolver side of a future.

    Parameters
    ----------
    initializer:
        Optional callable invoked with the new deferred before the constructor
        returns (e.g. to start work or wire listeners).
    """

    def __init__(self, initializer: Optional[Callable[["Deferred"], Any]] = None) -> None:
        self._state = FutureState.PENDING
        self._args: Optional[Tuple[Any, ...]] = None
        self._context: Any = None
        self._listeners: Dict[FutureState, List[Callback]] = {
            FutureState.RESOLVED: [],
            FutureState.REJECTED: [],
        }
        self._progress_listeners: List[Callback] = []
        self._last_progress: Optional[Tuple[Any, ...]] = None
        self._promise = self._make_promise()
        if initializer is not None:
            initializer(self)

    def _make_promise(self) -> Promise:
        return Promise(self)

    # -- settling -------------------------------------------------------
    def resolve(self, *args: Any) -> "Deferred":
        return self.resolve_with(self._promise, args)

    def reject(self, *args: Any) -> "Deferred":
        return self.reject_with(self._promise, args)

    def notify(self, *args: Any) -> "Deferred":
        return self.notify_with(self._promise, args)

    def resolve_with(self, context: Any, args: Sequence[Any] = ()) -> "Deferred":
        return self._settle(FutureState.RESOLVED, context, args)

    def reject_with(self, context: Any, args: Sequence[Any] = ()) -> "Deferred":
        return self._settle(FutureState.REJECTED, context, args)

    def notify_with(self, context: Any, args: Sequence[Any] = ()) -> "Deferred":
        """Emit a progress notification; ignored once settled."""
        if self._state.settled:
            return self
        self._last_progress = progress = tuple(args)
        self._context = context
        # A listener that settles this deferred cancels the rest of the batch.
        dispatch((cb, progress, self) for cb in list(self._progress_listeners))
        return self

    def _settle(self, state: FutureState, context: Any, args: Sequence[Any]) -> "Deferred":
        if self._state.settled:
            return self
        self._state = state
        self._args = tuple(args)
        self._context = context
        callbacks = self._listeners[state]
        self._listeners = {FutureState.RESOLVED: [], FutureState.REJECTED: []}
        self._progress_listeners = []
        args = self._args
        dispatch((cb, args, None) for cb in callbacks)
        return self

    # -- registration (used by Promise) ---------------------------------
    def _listen(self, state: FutureState, callbacks: Iterable[Callback]) -> None:
        if self._state is FutureState.PENDING:
            self._listeners[state].extend(callbacks)
        elif self._state is state:
            args = self._args or ()
            dispatch((cb, args, None) for cb in callbacks)

    def _listen_progress(self, callbacks: Iterable[Callback]) -> None:
        if self._state.settled:
            return
        callbacks = list(callbacks)
        self._progress_listeners.extend(callbacks)
        if self._last_progress is not None:
            progress = self._last_progress
            dispatch((cb, progress, self) for cb in callbacks)

    # -- observer surface ------------------------------------------------
    def promise(self) -> Promise:
        return self._promise

    def done(self, *callbacks: Callback) -> "Deferred":
        self._promise.done(*callbacks)
        return self

    def fail(self, *callbacks: Callback) -> "Deferred":
        self._promise.fail(*callbacks)
        return self

    def progress(self, *callbacks: Callback) -> "Deferred":
        self._promise.progress(*callbacks)
        return self

    def always(self, *callbacks: Callback) -> "Deferred":
        self._promise.always(*callbacks)
        return self

    def state(self) -> FutureState:
        return self._state

    @property
    def args(self) -> Optional[Tuple[Any, ...]]:
        return self._args

    @property
    def context(self) -> Any:
        return self._context

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"Deferred(state={self._state.value}, args={self._args!r})"


__all__ = ["Deferred"]
