"""Error taxonomy public surface.

Re-exports the one-class-per-file implementations under ``errors_parts``.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.abortable_error import AbortableError
from .errors_parts.classification import classify_exception

__all__ = ["ErrorCode", "AbortableError", "classify_exception"]
