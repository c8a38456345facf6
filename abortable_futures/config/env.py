"""Environment parsing helpers for abortable future settings.

Helpers never raise on unset or malformed variables; they return the supplied
default so a bad environment degrades to built-in behaviour.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, Optional

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def parse_level(value: Optional[str], default: int = logging.WARNING) -> int:
    """Parse a logging level name (case-insensitive) into its integer constant.

    Unknown or empty values fall back to ``default``.
    """
    if not value:
        return default
    return _LEVELS.get(value.strip().upper(), default)


def env_bool(name: str, default: bool) -> bool:
    """Read ``name`` as a boolean flag (``1/0``, ``true/false``, ``yes/no``, ``on/off``)."""
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in _TRUE_VALUES:
        return True
    if v in _FALSE_VALUES:
        return False
    return default


def env_choice(name: str, choices: Iterable[str], default: str) -> str:
    """Read ``name`` and return it lowercased if it is one of ``choices``."""
    raw = os.getenv(name)
    if not raw:
        return default
    v = raw.strip().lower()
    return v if v in set(choices) else default


__all__ = ["parse_level", "env_bool", "env_choice"]
