"""Unit tests for error classification."""
from __future__ import annotations

from pydantic import BaseModel, ValidationError

from abortable_futures.base.cancellation import CancelledError
from abortable_futures.base.errors import AbortableError, ErrorCode, classify_exception


class _Strict(BaseModel):
    n: int


def _validation_error() -> ValidationError:
    try:
        _Strict(n="not a number")
    except ValidationError as exc:
        return exc
    raise AssertionError("expected ValidationError")


def test_classify_passthrough_and_known_types():
    assert classify_exception(AbortableError(ErrorCode.UNSUPPORTED, "x")) is ErrorCode.UNSUPPORTED
    assert classify_exception(CancelledError("stop")) is ErrorCode.CANCELLED
    assert classify_exception(_validation_error()) is ErrorCode.VALIDATION
    assert classify_exception(TypeError("bad")) is ErrorCode.VALIDATION
    assert classify_exception(RuntimeError("other")) is ErrorCode.UNKNOWN


def test_error_code_values_are_stable_strings():
    assert ErrorCode.CANCELLED.value == "cancelled"
    assert ErrorCode("unsupported") is ErrorCode.UNSUPPORTED
    assert {code.value for code in ErrorCode} == {"cancelled", "validation", "unsupported", "unknown"}


def test_abortable_error_str():
    err = AbortableError(code=ErrorCode.VALIDATION, message="invalid abort options")
    assert str(err) == "validation: invalid abort options"
