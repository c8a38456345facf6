"""Pytest configuration for the abortable futures test suite.

Every test starts from a clean ``ABORTABLE_*`` environment so the cached
configuration (abort policy, log level) reflects built-in defaults, and the
shared logger writes to the stderr stream active for that test.
"""

from __future__ import annotations

from typing import Callable, Iterator, List, Tuple

import pytest

from abortable_futures.base.logging import get_logger
from abortable_futures.config.defaults import ENV_ABORT_POLICY, ENV_LOG_JSON, ENV_LOG_LEVEL


@pytest.fixture(autouse=True)
def clean_abortable_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop ``ABORTABLE_*`` overrides for the duration of a test."""

    for name in (ENV_ABORT_POLICY, ENV_LOG_LEVEL, ENV_LOG_JSON):
        monkeypatch.delenv(name, raising=False)
    get_logger()
    yield


class CallRecorder:
    """Callable recording the positional args of every invocation."""

    def __init__(self, effect: Callable[..., object] | None = None) -> None:
        self.calls: List[Tuple[object, ...]] = []
        self._effect = effect

    def __call__(self, *args: object) -> None:
        self.calls.append(args)
        if self._effect is not None:
            self._effect(*args)


@pytest.fixture()
def recorder() -> Callable[..., CallRecorder]:
    """Factory fixture producing fresh :class:`CallRecorder` instances."""

    return CallRecorder
