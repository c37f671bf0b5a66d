from goconc.result import Result


def test_ok_state():
    r = Result(42, None)
    assert r.ok()
    assert r.value == 42


def test_ok_result():
    r = Result(42, None)
    assert r.ok()
    assert not r.failed()
    assert r.value == 42
    assert r.unwrap_or(99) == 42


def test_error_result():
    err = RuntimeError("fail")
    r = Result(0, err)
    assert not r.ok()
    assert r.failed()
    assert r.unwrap_or(77) == 77
    assert r.unwrap_or(88) == 88
    assert r.err is err


def test_bool_conversion():
    good = Result(10, None)
    bad = Result(0, RuntimeError("fail"))
    assert good
    assert not bad
    assert [r for r in (good, bad) if r] == [good]


def test_void_ok_case():
    r = Result(err=None)
    assert r.ok()
    assert not r.failed()
    assert bool(r) is True


def test_void_error_case():
    r = Result(err=RuntimeError("bad"))
    assert not r.ok()
    assert r.failed()
    assert bool(r) is False
    assert str(r.err) == "bad"