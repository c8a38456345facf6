"""Bridges between abortable futures and :class:`CancellationToken`.

Abort is push-style (cleanup callback), tokens are poll-style. These helpers
connect the two so work that polls a token stops when its future is aborted,
and cancelling a token aborts the futures attached to it.
"""
from __future__ import annotations

from typing import Any, Callable, Optional

from ..base.cancellation import CancellationToken, CancelledError
from ..base.errors import AbortableError, ErrorCode
from ..base.interfaces import FutureLike, abort_capability

DEFAULT_ABORT_REASON = "aborted"


def cancel_on_abort(token: CancellationToken) -> Callable[..., None]:
    """Return an ``on_abort`` cleanup that cancels ``token``.

    The reason is the first abort argument rendered as text, or
    ``"aborted"`` when abort was called without arguments.
    """

    def _on_abort(*args: Any) -> None:
        token.cancel(str(args[0]) if args else DEFAULT_ABORT_REASON)

    return _on_abort


def abort_on_cancel(future: FutureLike, token: CancellationToken) -> FutureLike:
    """Abort ``future`` with a :class:`CancelledError` when ``token`` is cancelled.

    Returns ``future``. Raises :class:`AbortableError` (``UNSUPPORTED``) if the
    future has no abort capability.
    """
    abort = abort_capability(future)
    if abort is None:
        raise AbortableError(code=ErrorCode.UNSUPPORTED, message="future has no abort capability")

    def _on_cancel(reason: Optional[str]) -> None:
        abort(CancelledError(reason or "operation cancelled"))

    token.on_cancel(_on_cancel)
    return future


__all__ = ["cancel_on_abort", "abort_on_cancel", "DEFAULT_ABORT_REASON"]
