import pytest

from goconc.defer import Defer


def test_executes_on_scope_exit():
    called = []
    with Defer() as d:
        d.defer(lambda: called.append(True))
        assert called == []
    assert called == [True]


def test_constructor_function_runs_on_exit():
    called = []
    with Defer(lambda: called.append("done")):
        assert called == []
    assert called == ["done"]


def test_runs_in_reverse_order():
    order = []
    with Defer() as d:
        d.defer(order.append, 1)
        d.defer(order.append, 2)
        d.defer(order.append, 3)
    assert order == [3, 2, 1]


def test_passes_keyword_arguments():
    seen = {}
    with Defer() as d:
        d.defer(seen.update, key="value")
    assert seen == {"key": "value"}


def test_runs_when_block_raises():
    called = []
    with pytest.raises(KeyError):
        with Defer() as d:
            d.defer(lambda: called.append(True))
            raise KeyError("boom")
    assert called == [True]


def test_run_clears_pending_calls():
    count = []
    d = Defer()
    d.defer(lambda: count.append(1))
    d.run()
    d.run()
    assert count == [1]


def test_all_calls_run_and_first_error_is_raised():
    ran = []

    def fail_a():
        raise ValueError("a")

    def fail_b():
        raise RuntimeError("b")

    d = Defer()
    d.defer(lambda: ran.append("first"))
    d.defer(fail_a)
    d.defer(fail_b)
    with pytest.raises(RuntimeError, match="b"):
        d.run()
    assert ran == ["first"]