"""Observer handles produced by the abortable future factory.

``ObserverHandle`` is the read-only view of an abortable deferred and adds
``then`` chaining. ``AbortableHandle`` additionally carries the abort
capability; handles created with ``is_abortable=False`` are plain
``ObserverHandle`` instances and therefore have no ``abort`` attribute.
"""
from __future__ import annotations

from typing import Any, Callable, Optional

from ..base.deferred import Promise


class ObserverHandle(Promise):
    """Read-only handle with chaining support."""

    @property
    def id(self) -> str:
        """Short identifier used in structured log events."""
        return self._deferred.id

    def then(
        self,
        on_resolve: Optional[Callable[..., Any]] = None,
        on_reject: Optional[Callable[..., Any]] = None,
        on_progress: Optional[Callable[..., Any]] = None,
    ) -> "AbortableHandle":
        """Derive an abortable handle from this one's eventual outcome.

        See :func:`abortable_futures.abort.chain.chain_then`.
        """
        from .chain import chain_then

        return chain_then(self, on_resolve, on_reject, on_progress)


class AbortableHandle(ObserverHandle):
    """Observer handle exposing ``abort``."""

    def abort(self, *args: Any) -> "AbortableHandle":
        """Run the registered cleanup with ``args``, then reject with ``args``.

        Rejecting an already-settled future has no effect; whether cleanup
        re-runs on later calls depends on the handle's ``AbortPolicy``.
        """
        self._deferred._abort(args)
        return self


__all__ = ["ObserverHandle", "AbortableHandle"]
