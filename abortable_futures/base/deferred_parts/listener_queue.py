"""Per-thread FIFO queue that runs deferred listeners.

A listener that settles (or notifies) another deferred enqueues that
deferred's listeners instead of calling them on the current stack, so a
chain of any length settles at constant stack depth. The outermost call
drains the queue before it returns; a listener exception does not stop the
drain and the first one is re-raised once the queue is empty.
"""
from __future__ import annotations

import threading
from collections import deque
from typing import Any, Callable, Deque, Iterable, Optional, Tuple

Callback = Callable[..., Any]
# (listener, args, deferred whose settlement cancels a queued progress call)
Entry = Tuple[Callback, Tuple[Any, ...], Optional[Any]]


class ListenerQueue(threading.local):
    """Pending listener calls of the current thread."""

    def __init__(self) -> None:
        self.pending: Deque[Entry] = deque()
        self.draining = False

    def run(self, entries: Iterable[Entry]) -> None:
        self.pending.extend(entries)
        if self.draining:
            return
        self.draining = True
        first_error: Optional[Exception] = None
        try:
            while self.pending:
                callback, args, progress_of = self.pending.popleft()
                if progress_of is not None and progress_of.state().settled:
                    continue
                try:
                    callback(*args)
                except Exception as exc:  # noqa: BLE001 - re-raised once drained
                    if first_error is None:
                        first_error = exc
        finally:
            self.draining = False
            self.pending.clear()
        if first_error is not None:
            raise first_error


_QUEUE = ListenerQueue()


def dispatch(entries: Iterable[Entry]) -> None:
    """Queue ``entries`` and drain unless a drain is already running."""
    _QUEUE.run(entries)


__all__ = ["ListenerQueue", "dispatch"]
