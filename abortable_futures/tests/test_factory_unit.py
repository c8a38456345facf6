"""Unit tests for the abortable future factory and the abort capability.

Covers abort-before-work, absent capability, option parsing (including the
camelCase aliases) and both cleanup policies for repeated abort calls.
"""
from __future__ import annotations

import pytest

from abortable_futures import (
    Abortable,
    AbortableDeferred,
    AbortableError,
    AbortableHandle,
    AbortOptions,
    AbortPolicy,
    ErrorCode,
    FutureState,
    ObserverHandle,
    create_abortable,
)


def test_abort_runs_cleanup_with_args_and_rejects(recorder):
    cleanup = recorder()
    f = create_abortable(None, {"isAbortable": True, "onAbort": cleanup})
    failures = []
    f.fail(lambda *a: failures.append(a))

    assert f.abort(1, 2) is f
    assert cleanup.calls == [(1, 2)]
    assert f.state() is FutureState.REJECTED
    assert f.args == (1, 2)
    assert failures == [(1, 2)]


def test_abort_rejection_context_is_the_handle():
    f = create_abortable(is_abortable=True)
    f.abort()
    assert f.context is f


def test_non_abortable_handle_has_no_abort():
    f = create_abortable()
    assert isinstance(f, ObserverHandle)
    assert not hasattr(f, "abort")
    assert not isinstance(f, Abortable)


def test_abortable_handle_satisfies_protocol():
    f = create_abortable(is_abortable=True)
    assert isinstance(f, AbortableHandle)
    assert isinstance(f, Abortable)


def test_abort_without_cleanup_only_rejects():
    f = create_abortable(is_abortable=True, on_abort="not callable")
    f.abort("x")
    assert f.state() is FutureState.REJECTED


def test_initializer_receives_resolver_and_can_settle():
    f = create_abortable(lambda d: d.resolve("ready"), is_abortable=True)
    assert f.state() is FutureState.RESOLVED
    assert f.args == ("ready",)


def test_abort_after_resolve_keeps_state_and_reruns_cleanup_by_default(recorder):
    cleanup = recorder()
    d = AbortableDeferred(is_abortable=True, on_abort=cleanup)
    d.resolve("value")

    d.promise().abort("late")
    d.promise().abort("later")

    assert d.state() is FutureState.RESOLVED
    assert d.args == ("value",)
    assert cleanup.calls == [("late",), ("later",)]


def test_repeated_abort_on_pending_rejects_once_and_reruns_cleanup(recorder):
    cleanup = recorder()
    rejections = []
    f = create_abortable(is_abortable=True, on_abort=cleanup)
    f.fail(lambda *a: rejections.append(a))

    f.abort("first")
    f.abort("second")

    assert rejections == [("first",)]
    assert f.args == ("first",)
    assert cleanup.calls == [("first",), ("second",)]


def test_once_policy_runs_cleanup_for_first_abort_only(recorder):
    cleanup = recorder()
    f = create_abortable(is_abortable=True, on_abort=cleanup, policy="once")

    f.abort("first")
    f.abort("second")

    assert cleanup.calls == [("first",)]
    assert f.args == ("first",)


def test_policy_default_follows_environment(monkeypatch, recorder):
    monkeypatch.setenv("ABORTABLE_ABORT_POLICY", "once")
    cleanup = recorder()
    d = AbortableDeferred(is_abortable=True, on_abort=cleanup)
    assert d.options.policy is AbortPolicy.ONCE

    d.promise().abort()
    d.promise().abort()
    assert len(cleanup.calls) == 1


def test_keyword_overrides_take_precedence_over_options():
    opts = AbortOptions(is_abortable=False)
    f = create_abortable(None, opts, isAbortable=True)
    assert isinstance(f, AbortableHandle)


def test_invalid_options_raise_validation_error():
    with pytest.raises(AbortableError) as excinfo:
        create_abortable(None, {"is_abortable": True, "unexpected": 1})
    assert excinfo.value.code is ErrorCode.VALIDATION
    assert excinfo.value.raw is not None


def test_non_mapping_options_rejected():
    with pytest.raises(AbortableError) as excinfo:
        create_abortable(None, ["is_abortable"])
    assert excinfo.value.code is ErrorCode.VALIDATION


def test_unknown_policy_rejected():
    with pytest.raises(AbortableError):
        create_abortable(policy="sometimes")


def test_cleanup_exception_propagates_and_leaves_future_pending():
    def _cleanup(*_a):
        raise RuntimeError("cleanup failed")

    f = create_abortable(is_abortable=True, on_abort=_cleanup)
    with pytest.raises(RuntimeError):
        f.abort()
    assert f.state() is FutureState.PENDING


def test_handles_have_distinct_ids():
    a = create_abortable()
    b = create_abortable()
    assert a.id != b.id
