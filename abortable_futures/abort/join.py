"""Join combinator: all-of-N future with an abort fan-out.

The combined handle settles through the base ``when`` semantics. Its
``abort(*args)`` calls ``abort(*args)`` on every member exposing one, in input
order, and skips the rest. The fan-out does not settle the combined future by
itself; member rejections reject it through ordinary join semantics.
"""
from __future__ import annotations

import logging
from typing import Any, Sequence, Tuple

from ..base.deferred import when
from ..base.errors import classify_exception
from ..base.interfaces import abort_capability
from ..base.logging import get_logger, log_event
from .factory import AbortableDeferred
from .handle import ObserverHandle

logger = get_logger("abortable.join")


class JoinHandle(ObserverHandle):
    """Observer handle of a join whose ``abort`` fans out to the members."""

    def abort(self, *args: Any) -> "JoinHandle":
        """Abort every abortable member with ``args``.

        A member abort that raises does not stop the fan-out; once every
        member has been tried, the first failure is re-raised.
        """
        self._deferred._fan_out(args)
        return self


class _JoinDeferred(AbortableDeferred):
    def __init__(self, members: Tuple[Any, ...]) -> None:
        self._members = members
        super().__init__(is_abortable=True)

    def _make_promise(self) -> JoinHandle:
        return JoinHandle(self)

    def _fan_out(self, args: Tuple[Any, ...]) -> None:
        ctx = self._log_context("join.abort")
        first_error: BaseException | None = None
        aborted = 0
        for index, member in enumerate(self._members):
            abort = abort_capability(member)
            if abort is None:
                log_event(logger, "join.abort_skipped", ctx, index=index)
                continue
            try:
                abort(*args)
                aborted += 1
            except Exception as exc:  # noqa: BLE001 - re-raised after the fan-out
                log_event(
                    logger,
                    "join.abort_failed",
                    ctx,
                    level=logging.WARNING,
                    index=index,
                    error_code=classify_exception(exc).value,
                    error=str(exc),
                )
                if first_error is None:
                    first_error = exc
        log_event(logger, "join.abort", ctx, members=len(self._members), aborted=aborted)
        if first_error is not None:
            raise first_error


def join_all(futures: Sequence[Any]) -> JoinHandle:
    """Join ``futures`` into one handle whose abort fans out to every member.

    Members that are not future-like count as already resolved values, as in
    the base ``when``.
    """
    members = tuple(futures)
    deferred = _JoinDeferred(members)
    when(*members).done(deferred.resolve).fail(deferred.reject).progress(deferred.notify)
    return deferred.promise()


def join(*futures: Any) -> JoinHandle:
    """Variadic form of :func:`join_all`."""
    return join_all(futures)


__all__ = ["JoinHandle", "join_all", "join"]
