"""One-field mutable cell holding a chain link's current abort target.

Owned by a single chain link: written only when that link's continuation
returns a nested future, read only by that link's abort forwarder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..base.interfaces import Abortable


@dataclass
class AbortCell:
    """Current abort delegate of a derived future (``None`` means no-op).

    The cell is itself the ``on_abort`` cleanup of the derived future. The
    factory reads ``target`` to walk links between abortable handles
    iteratively; any other target is reached through :meth:`forward`.
    """

    target: Optional[Abortable] = None

    @property
    def bound(self) -> bool:
        return self.target is not None

    def rebind(self, target: Optional[Abortable]) -> None:
        self.target = target

    def forward(self, *args: Any) -> None:
        """Call ``abort(*args)`` on the current target if one is bound."""
        if self.target is not None:
            self.target.abort(*args)

    __call__ = forward


__all__ = ["AbortCell"]
