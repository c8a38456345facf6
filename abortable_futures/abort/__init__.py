"""Abortable future layer (public API facade).

- ``create_abortable`` / ``AbortableDeferred``: factory and resolver.
- ``ObserverHandle.then`` / ``chain_then``: chain operator with abort
  delegation that follows nested futures.
- ``join_all`` / ``join``: all-of-N join with abort fan-out.
- ``cancel_on_abort`` / ``abort_on_cancel``: CancellationToken bridges.
"""

from .options import AbortOptions, AbortPolicy, resolve_options
from .abort_cell import AbortCell
from .handle import AbortableHandle, ObserverHandle
from .factory import AbortableDeferred, create_abortable
from .chain import chain_then
from .join import JoinHandle, join, join_all
from .token_bridge import abort_on_cancel, cancel_on_abort

__all__ = [
    "AbortOptions",
    "AbortPolicy",
    "resolve_options",
    "AbortCell",
    "ObserverHandle",
    "AbortableHandle",
    "AbortableDeferred",
    "create_abortable",
    "chain_then",
    "JoinHandle",
    "join",
    "join_all",
    "abort_on_cancel",
    "cancel_on_abort",
]
