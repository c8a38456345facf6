"""Structured logging context for future lifecycle events.

:class:`LogContext` carries the identifiers shared by every event a future
emits (its id, the operation being performed and, for derived futures, the
parent id). ``to_dict`` merges ``extra`` and prunes ``None`` values.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for abortable future logging events."""

    future_id: Optional[str] = None
    operation: Optional[str] = None
    parent_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
