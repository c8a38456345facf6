"""Chain operator: derive an abortable future from another future's outcome.

An abort issued on the derived (child) future walks backward to whichever
future is currently live:

- while the parent is pending, the child's abort delegates to the parent's;
- once a resolve/reject continuation returns a nested future, the child's
  abort delegates to that nested future's abort instead.

The delegate lives in an :class:`AbortCell` owned by the link. Continuation
exceptions are not caught here; they propagate to whoever settled the parent.
"""
from __future__ import annotations

from typing import Any, Callable, List, Optional

from ..base.interfaces import FutureLike, abort_target, is_future_like
from ..base.logging import LogContext, get_logger, log_event
from .abort_cell import AbortCell
from .factory import AbortableDeferred
from .handle import AbortableHandle

logger = get_logger("abortable.chain")

# (child action, parent listener, continuation may rebind the abort cell)
_PAIRS = (
    ("resolve", "done", True),
    ("reject", "fail", True),
    ("notify", "progress", False),
)


def _settle_context(parent: Any, child: AbortableDeferred) -> Any:
    """Pick the context ``child`` is settled with after ``parent`` fires.

    A parent settled with its own handle as context maps to the child's own
    handle; any other context is forwarded unchanged.
    """
    context = getattr(parent, "context", parent)
    return child.promise() if context is parent else context


def _forwarder(origin: Any, child: AbortableDeferred, action: str) -> Callable[..., None]:
    """Settle or notify ``child`` with the args and context of ``origin``."""
    settle_with = getattr(child, f"{action}_with")

    def _forward(*args: Any) -> None:
        settle_with(_settle_context(origin, child), args)

    return _forward


def chain_then(
    parent: FutureLike,
    on_resolve: Optional[Callable[..., Any]] = None,
    on_reject: Optional[Callable[..., Any]] = None,
    on_progress: Optional[Callable[..., Any]] = None,
) -> AbortableHandle:
    """Return an abortable handle for the continuation of ``parent``.

    Parameters
    ----------
    parent:
        Any future-like value; resolvers are normalized via ``promise()``.
    on_resolve, on_reject, on_progress:
        Optional continuations for the matching parent event. An absent (or
        non-callable) continuation forwards the event's args unchanged.

    Returns
    -------
    AbortableHandle
        Always abortable. If ``parent`` has no abort capability the abort
        only rejects the child.
    """
    source = parent.promise()
    cell = AbortCell(abort_target(source))
    parent_id = getattr(source, "id", None)
    fns: List[Optional[Callable[..., Any]]] = [on_resolve, on_reject, on_progress]

    def _continuation(child: AbortableDeferred, fn: Callable[..., Any], action: str, rebinds: bool):
        settle_with = getattr(child, f"{action}_with")

        def _run(*args: Any) -> None:
            returned = fn(*args)
            if is_future_like(returned):
                nested = returned.promise()
                if rebinds:
                    cell.rebind(abort_target(nested))
                    log_event(
                        logger,
                        "chain.rebind",
                        LogContext(future_id=child.id, operation="then", parent_id=parent_id),
                        nested_id=getattr(nested, "id", None),
                        has_abort=cell.bound,
                    )
                for forwarded, listener, _ in _PAIRS:
                    getattr(nested, listener)(_forwarder(nested, child, forwarded))
            else:
                settle_with(_settle_context(source, child), (returned,))

        return _run

    def _wire(child: AbortableDeferred) -> None:
        for (action, listener, rebinds), fn in zip(_PAIRS, fns):
            register = getattr(source, listener)
            if callable(fn):
                register(_continuation(child, fn, action, rebinds))
            else:
                register(_forwarder(source, child, action))
        # Continuations stay reachable only through their wired listeners.
        fns.clear()

    child = AbortableDeferred(_wire, is_abortable=True, on_abort=cell)
    log_event(
        logger,
        "chain.link",
        LogContext(future_id=child.id, operation="then", parent_id=parent_id),
        has_abort=cell.bound,
        state=child.state().value,
    )
    return child.promise()


__all__ = ["chain_then"]
