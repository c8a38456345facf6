"""Deferred parts package (state enum, resolver, observer, join)."""

from .future_state import FutureState
from .deferred import Deferred
from .promise import Promise
from .when import when

__all__ = ["FutureState", "Deferred", "Promise", "when"]
