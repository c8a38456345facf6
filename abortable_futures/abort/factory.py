"""Abortable future factory.

Wraps base :class:`Deferred` creation and attaches the abort capability to the
observer handle when requested. The factory composes over the base primitives
(subclassing the resolver to choose the handle type); it never patches them.

Side effects
------------
Creation and each abort call emit DEBUG-level structured events
(``future.create``, ``abort.invoke``) on the ``abortable.factory`` logger.
"""
from __future__ import annotations

import uuid
from typing import Any, Callable, List, Optional, Tuple

from ..base.deferred import Deferred
from ..base.logging import LogContext, get_logger, log_event
from .abort_cell import AbortCell
from .handle import AbortableHandle, ObserverHandle
from .options import AbortOptions, AbortPolicy, OptionsInput, cleanup_of, resolve_options

logger = get_logger("abortable.factory")


def _new_id() -> str:
    return uuid.uuid4().hex[:12]


class AbortableDeferred(Deferred):
    """Resolver whose observer handle may carry an abort capability.

    Parameters
    ----------
    initializer:
        Optional callable invoked with the new resolver before the
        constructor returns.
    options:
        :class:`AbortOptions` or a mapping (``is_abortable``/``isAbortable``,
        ``on_abort``/``onAbort``, ``policy``).
    **overrides:
        Option values taking precedence over ``options``.
    """

    def __init__(
        self,
        initializer: Optional[Callable[["AbortableDeferred"], Any]] = None,
        options: OptionsInput = None,
        **overrides: Any,
    ) -> None:
        # Set before Deferred.__init__, which builds the handle.
        self._options: AbortOptions = resolve_options(options, **overrides)
        self._abort_calls = 0
        self.id = _new_id()
        log_event(
            logger,
            "future.create",
            self._log_context("create"),
            abortable=self._options.is_abortable,
            policy=self._options.policy.value,
        )
        super().__init__(initializer)

    def _make_promise(self) -> ObserverHandle:
        if self._options.is_abortable:
            return AbortableHandle(self)
        return ObserverHandle(self)

    @property
    def options(self) -> AbortOptions:
        return self._options

    def _log_context(self, operation: str) -> LogContext:
        return LogContext(future_id=self.id, operation=operation)

    def promise(self) -> ObserverHandle:  # type: ignore[override]
        return self._promise  # type: ignore[return-value]

    def then(
        self,
        on_resolve: Optional[Callable[..., Any]] = None,
        on_reject: Optional[Callable[..., Any]] = None,
        on_progress: Optional[Callable[..., Any]] = None,
    ) -> AbortableHandle:
        return self.promise().then(on_resolve, on_reject, on_progress)

    def _begin_abort(self) -> Optional[Callable[..., Any]]:
        """Count one abort call; return the cleanup to run, if any."""
        cleanup = cleanup_of(self._options)
        first_call = self._abort_calls == 0
        self._abort_calls += 1
        run_cleanup = cleanup is not None and (first_call or self._options.policy is AbortPolicy.RERUN)
        log_event(
            logger,
            "abort.invoke",
            self._log_context("abort"),
            state=self.state().value,
            call=self._abort_calls,
            cleanup=run_cleanup,
            policy=self._options.policy.value,
        )
        return cleanup if run_cleanup else None

    def _abort(self, args: Tuple[Any, ...]) -> None:
        # Chain links delegate through an AbortCell; follow those hops in a
        # loop so the stack depth does not grow with the chain length.
        path: List[AbortableDeferred] = []
        node: AbortableDeferred = self
        while True:
            path.append(node)
            cleanup = node._begin_abort()
            target = cleanup.target if isinstance(cleanup, AbortCell) else None
            if isinstance(target, AbortableHandle) and isinstance(target._deferred, AbortableDeferred):
                node = target._deferred
                continue
            if cleanup is not None:
                cleanup(*args)
            break
        # Root first, matching the order a nested abort call would reject in.
        for node in reversed(path):
            node.reject_with(node._promise, args)


def create_abortable(
    initializer: Optional[Callable[[AbortableDeferred], Any]] = None,
    options: OptionsInput = None,
    **overrides: Any,
) -> ObserverHandle:
    """Create a pending computation and return its observer handle.

    The handle is an :class:`AbortableHandle` when ``is_abortable`` is true,
    otherwise a plain :class:`ObserverHandle` without ``abort``. The
    ``initializer`` receives the resolver and is the only way to settle the
    computation.
    """
    return AbortableDeferred(initializer, options, **overrides).promise()


__all__ = ["AbortableDeferred", "create_abortable"]
