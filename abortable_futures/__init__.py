"""abortable_futures package

Deferred computations with resolve/reject/progress, chainable transforms and
cooperative cancellation that propagates through chains of derived futures
(including continuations that return nested futures) and fans out across
joins.

Public API (re-exported):
    - Version: ``__version__``
    - Factory: :func:`create_abortable`, :class:`AbortableDeferred`
    - Chain: ``handle.then(...)`` / :func:`chain_then`
    - Join: :func:`join_all`, :func:`join`
    - Options: :class:`AbortOptions`, :class:`AbortPolicy`
    - Base futures: :class:`Deferred`, :class:`Promise`, :func:`when`
    - Errors: :class:`AbortableError`, :class:`ErrorCode`
    - Cancellation: :class:`CancellationToken`, :class:`CancelledError`

Example::

    handle = create_abortable(start_request, is_abortable=True, on_abort=cancel_request)
    result = handle.then(parse).then(fetch_details)
    result.abort("user navigated away")
"""

from .base.deferred import Deferred, FutureState, Promise, when
from .base.interfaces import Abortable, FutureLike, is_future_like
from .base.errors import AbortableError, ErrorCode
from .base.cancellation import CancellationToken, CancelledError
from .abort import (
    AbortableDeferred,
    AbortableHandle,
    AbortOptions,
    AbortPolicy,
    JoinHandle,
    ObserverHandle,
    abort_on_cancel,
    cancel_on_abort,
    chain_then,
    create_abortable,
    join,
    join_all,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Factory / handles
    "create_abortable",
    "AbortableDeferred",
    "ObserverHandle",
    "AbortableHandle",
    "JoinHandle",
    "AbortOptions",
    "AbortPolicy",
    # Operators
    "chain_then",
    "join_all",
    "join",
    # Base futures
    "Deferred",
    "Promise",
    "FutureState",
    "when",
    "FutureLike",
    "Abortable",
    "is_future_like",
    # Errors
    "AbortableError",
    "ErrorCode",
    # Cancellation
    "CancellationToken",
    "CancelledError",
    "abort_on_cancel",
    "cancel_on_abort",
]
