"""All-of-N join over futures."""
from __future__ import annotations

from typing import Any, Callable, List

from ..interfaces_parts.future_like import is_future_like
from .deferred import Deferred
from .promise import Promise


def _collapse(args: tuple) -> Any:
    return args[0] if len(args) == 1 else args


def when(*futures: Any) -> Promise:
    """Return a promise settling once every input has resolved, or any rejected.

    - Resolves with one arg per input, in input order. An input resolved with
      a single arg contributes that value, otherwise the tuple of its args.
    - Rejects with the args of the first rejection.
    - Progress from input ``i`` is forwarded as ``(i, *args)``.
    - Inputs that are not future-like count as already resolved with
      themselves. With no inputs the result resolves immediately.
    """
    master = Deferred()
    values: List[Any] = [None] * len(futures)
    remaining = [len(futures)]

    if not futures:
        master.resolve()
        return master.promise()

    def _settle_one(index: int) -> Callable[..., None]:
        def _done(*args: Any) -> None:
            values[index] = _collapse(args)
            remaining[0] -= 1
            if remaining[0] == 0:
                master.resolve(*values)

        return _done

    def _notify_one(index: int) -> Callable[..., None]:
        def _progress(*args: Any) -> None:
            master.notify(index, *args)

        return _progress

    for index, future in enumerate(futures):
        if is_future_like(future):
            future.promise().done(_settle_one(index)).fail(master.reject).progress(_notify_one(index))
        else:
            _settle_one(index)(future)

    return master.promise()


__all__ = ["when"]
