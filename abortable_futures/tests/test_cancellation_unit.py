"""Unit tests for cooperative cancellation tokens and their future bridges.

Covers idempotent cancel, cascade to children, callbacks, and the
``cancel_on_abort`` / ``abort_on_cancel`` bridges in both directions.
"""
from __future__ import annotations

import pytest

from abortable_futures import (
    AbortableError,
    CancellationToken,
    CancelledError,
    ErrorCode,
    FutureState,
    abort_on_cancel,
    cancel_on_abort,
    create_abortable,
)


def test_cancel_cascades_to_children_and_is_idempotent():
    parent = CancellationToken()
    child1 = parent.child()
    child2 = parent.child()

    parent.cancel(reason="stop")
    parent.cancel(reason="ignored")

    assert parent.cancelled is True and parent.reason == "stop"
    assert child1.cancelled is True and child1.reason == "stop"
    assert child2.cancelled is True and child2.reason == "stop"


def test_link_child_after_parent_cancel_immediately_cancels_child():
    parent = CancellationToken()
    parent.cancel("done")
    late_child = CancellationToken(parent=parent)
    assert late_child.cancelled is True and late_child.reason == "done"


def test_raise_if_cancelled_raises_custom_error():
    token = CancellationToken()
    token.raise_if_cancelled()
    token.cancel("terminate")
    with pytest.raises(CancelledError, match="terminate"):
        token.raise_if_cancelled()


def test_on_cancel_callbacks_run_once_and_late_callbacks_run_immediately():
    token = CancellationToken()
    seen = []
    token.on_cancel(seen.append)
    token.cancel("first")
    token.cancel("second")
    token.on_cancel(lambda reason: seen.append(f"late:{reason}"))
    assert seen == ["first", "late:first"]


def test_abort_cancels_linked_token():
    token = CancellationToken()
    f = create_abortable(is_abortable=True, on_abort=cancel_on_abort(token))

    f.abort("user left")

    assert token.cancelled is True
    assert token.reason == "user left"
    assert f.state() is FutureState.REJECTED


def test_abort_without_args_uses_default_reason():
    token = CancellationToken()
    create_abortable(is_abortable=True, on_abort=cancel_on_abort(token)).abort()
    assert token.reason == "aborted"


def test_token_cancel_aborts_future_with_cancelled_error():
    token = CancellationToken()
    f = abort_on_cancel(create_abortable(is_abortable=True), token)

    token.cancel("shutdown")

    assert f.state() is FutureState.REJECTED
    (reason,) = f.args
    assert isinstance(reason, CancelledError)
    assert str(reason) == "shutdown"


def test_token_cancel_reaches_chain_root():
    token = CancellationToken()
    root = create_abortable(is_abortable=True, on_abort=cancel_on_abort(token))
    leaf = abort_on_cancel(root.then(lambda v: v), token)

    token.cancel("stop all")

    assert root.state() is FutureState.REJECTED
    assert leaf.state() is FutureState.REJECTED


def test_bidirectional_bridge_terminates():
    token = CancellationToken()
    f = create_abortable(is_abortable=True, on_abort=cancel_on_abort(token))
    abort_on_cancel(f, token)

    f.abort("once")

    assert token.reason == "once"
    # The token callback aborts first, so its CancelledError wins the rejection.
    assert f.state() is FutureState.REJECTED
    assert isinstance(f.args[0], CancelledError)


def test_abort_on_cancel_requires_abort_capability():
    with pytest.raises(AbortableError) as excinfo:
        abort_on_cancel(create_abortable(), CancellationToken())
    assert excinfo.value.code is ErrorCode.UNSUPPORTED
