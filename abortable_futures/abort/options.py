"""Typed creation options for abortable futures.

Purpose
-------
Capture the factory configuration (``is_abortable``, ``on_abort`` and the
cleanup re-run policy) in a small validated DTO. The camelCase keys
``isAbortable`` / ``onAbort`` are accepted as aliases.

Failure modes
-------------
Invalid input (unknown keys, wrong types, non-mapping options) raises
:class:`AbortableError` with ``ErrorCode.VALIDATION`` wrapping the pydantic
``ValidationError``.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..base.errors import AbortableError, ErrorCode
from ..config import get_abortable_config


class AbortPolicy(str, Enum):
    """When ``on_abort`` cleanup runs for repeated abort calls on one handle."""

    RERUN = "rerun"
    ONCE = "once"


def _default_policy() -> AbortPolicy:
    return AbortPolicy(get_abortable_config().abort_policy)


class AbortOptions(BaseModel):
    """Options recognized by the abortable future factory.

    Attributes
    ----------
    is_abortable:
        When false the produced handle has no ``abort`` method at all.
    on_abort:
        Cleanup invoked with the abort call's arguments before rejection.
        Anything that is not callable is treated as absent.
    policy:
        ``rerun`` runs cleanup on every abort call, even after settlement;
        ``once`` runs it for the first abort call only.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    is_abortable: bool = Field(default=False, alias="isAbortable")
    on_abort: Any = Field(default=None, alias="onAbort")
    policy: AbortPolicy = Field(default_factory=_default_policy)


_ALIASES = {"isAbortable": "is_abortable", "onAbort": "on_abort"}

OptionsInput = Union[AbortOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsInput = None, **overrides: Any) -> AbortOptions:
    """Merge ``options`` and keyword ``overrides`` into a validated model.

    Precedence: built-in defaults < configured default policy < ``options`` <
    ``overrides``.
    """
    data: Dict[str, Any]
    if options is None:
        data = {}
    elif isinstance(options, AbortOptions):
        data = {name: getattr(options, name) for name in AbortOptions.model_fields}
    elif isinstance(options, Mapping):
        data = {_ALIASES.get(k, k): v for k, v in options.items()}
    else:
        raise AbortableError(
            code=ErrorCode.VALIDATION,
            message=f"options must be a mapping or AbortOptions, got {type(options).__name__}",
        )
    data.update({_ALIASES.get(k, k): v for k, v in overrides.items()})
    try:
        return AbortOptions.model_validate(data)
    except ValidationError as exc:
        raise AbortableError(code=ErrorCode.VALIDATION, message="invalid abort options", raw=exc) from exc


def cleanup_of(options: AbortOptions) -> Optional[Any]:
    """Return ``on_abort`` if it is callable, else ``None``."""
    return options.on_abort if callable(options.on_abort) else None


__all__ = ["AbortPolicy", "AbortOptions", "resolve_options", "cleanup_of"]
