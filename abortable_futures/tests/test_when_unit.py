"""Unit tests for the all-of-N ``when`` join."""
from __future__ import annotations

from abortable_futures.base.deferred import Deferred, FutureState, when


def test_when_without_inputs_resolves_immediately():
    p = when()
    assert p.state() is FutureState.RESOLVED
    assert p.args == ()


def test_when_resolves_in_input_order_after_all_inputs():
    a, b = Deferred(), Deferred()
    p = when(a, 5, b.promise())
    b.resolve("b1", "b2")
    assert p.state() is FutureState.PENDING
    a.resolve("a")
    assert p.state() is FutureState.RESOLVED
    assert p.args == ("a", 5, ("b1", "b2"))


def test_when_rejects_on_first_rejection():
    a, b = Deferred(), Deferred()
    p = when(a, b)
    b.reject("nope")
    a.reject("later")
    assert p.state() is FutureState.REJECTED
    assert p.args == ("nope",)


def test_when_forwards_progress_with_member_index():
    a, b = Deferred(), Deferred()
    seen = []
    when(a, b).progress(lambda *args: seen.append(args))
    b.notify(50)
    assert seen == [(1, 50)]


def test_when_with_already_settled_inputs():
    p = when(Deferred().resolve(1), Deferred().resolve(2))
    assert p.args == (1, 2)
