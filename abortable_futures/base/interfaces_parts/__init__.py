"""Interface parts package (one Protocol per module)."""

from .future_like import FutureLike, is_future_like
from .abortable import Abortable, abort_capability, abort_target

__all__ = ["FutureLike", "is_future_like", "Abortable", "abort_capability", "abort_target"]
