"""Unified configuration layer for abortable futures.

Sources are merged in a predictable order:
    1. Built-in defaults (``defaults.py``)
    2. Environment variables
    3. Per-call overrides (``AbortOptions`` / keyword overrides at creation)

Environment Variables
---------------------
ABORTABLE_ABORT_POLICY
    ``rerun`` (default) re-runs ``on_abort`` cleanup on every abort call;
    ``once`` runs it only for the first abort call of a handle.
ABORTABLE_LOG_LEVEL
    Level of the shared ``abortable`` logger (default ``WARNING``).
ABORTABLE_LOG_JSON
    ``1`` (default) for JSON lines, ``0`` for plain text.

Public API
----------
* get_abortable_config() -> AbortableConfig
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from .defaults import (
    DEFAULT_ABORT_POLICY,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_JSON,
    ENV_ABORT_POLICY,
    ENV_LOG_LEVEL,
    ENV_LOG_JSON,
)
from .env import env_bool, env_choice, parse_level

ABORT_POLICIES = ("rerun", "once")


@dataclass(frozen=True)
class AbortableConfig:
    """Normalized process-wide settings.

    Attributes:
        abort_policy: Default cleanup policy for new abortable handles.
        log_level: Integer level for the shared ``abortable`` logger.
        log_json: Whether console output uses the JSON formatter.
    """

    abort_policy: str = DEFAULT_ABORT_POLICY
    log_level: int = parse_level(DEFAULT_LOG_LEVEL)
    log_json: bool = DEFAULT_LOG_JSON


_CACHED: AbortableConfig | None = None
_ENV_GUARD: str | None = None


def _env_guard() -> str:
    return "/".join(os.getenv(name, "") for name in (ENV_ABORT_POLICY, ENV_LOG_LEVEL, ENV_LOG_JSON))


def get_abortable_config() -> AbortableConfig:
    """Return the process-cached :class:`AbortableConfig`.

    The environment is re-read only when one of the ``ABORTABLE_*`` variables
    changed since the last call, so tests may adjust settings at runtime.
    """
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = _env_guard()
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED

    _CACHED = AbortableConfig(
        abort_policy=env_choice(ENV_ABORT_POLICY, ABORT_POLICIES, DEFAULT_ABORT_POLICY),
        log_level=parse_level(os.getenv(ENV_LOG_LEVEL), default=parse_level(DEFAULT_LOG_LEVEL)),
        log_json=env_bool(ENV_LOG_JSON, DEFAULT_LOG_JSON),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["AbortableConfig", "get_abortable_config", "ABORT_POLICIES"]
