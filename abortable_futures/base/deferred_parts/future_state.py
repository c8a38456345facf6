"""Lifecycle states of a future."""
from __future__ import annotations

from enum import Enum


class FutureState(str, Enum):
    """A future starts ``PENDING`` and moves exactly once to a terminal state."""

    PENDING = "pending"
    RESOLVED = "resolved"
    REJECTED = "rejected"

    @property
    def settled(self) -> bool:
        return self is not FutureState.PENDING


__all__ = ["FutureState"]
