from datetime import timedelta

import pytest

from goconc.duration import (
    Duration,
    hours,
    microseconds,
    milliseconds,
    minutes,
    nanoseconds,
    seconds,
)


def test_arithmetic_operations():
    d1 = Duration(Duration.SECOND)
    d2 = Duration(500 * Duration.MILLISECOND)

    assert (d1 + d2).milliseconds() == 1500
    assert (d1 - d2).milliseconds() == 500
    assert (d2 * 3).milliseconds() == 1500
    assert (d1 / 2).milliseconds() == 500


def test_comparisons():
    d1 = Duration(Duration.SECOND)
    d2 = Duration(2 * Duration.SECOND)
    d3 = Duration(Duration.SECOND)

    assert d1 < d2
    assert d1 <= d2
    assert d1 <= d3
    assert d2 > d1
    assert d2 >= d1
    assert d1 >= d3
    assert d1 == d3
    assert d1 != d2


def test_unit_constants_chain():
    assert microseconds(1).nanoseconds() == 1000
    assert milliseconds(1).microseconds() == 1000
    assert seconds(1).milliseconds() == 1000
    assert minutes(1).seconds() == 60.0
    assert hours(1).minutes() == 60.0


def test_constructors_match_constants():
    assert nanoseconds(7) == Duration(7)
    assert microseconds(3) == Duration(3 * Duration.MICROSECOND)
    assert milliseconds(100) == Duration(100 * Duration.MILLISECOND)
    assert seconds(2) == Duration(2 * Duration.SECOND)
    assert minutes(1) == Duration(Duration.MINUTE)
    assert hours(1) == Duration(Duration.HOUR)


def test_float_constructors():
    assert seconds(1.5).milliseconds() == 1500
    assert minutes(0.5) == seconds(30)
    assert hours(0.5) == minutes(30)


def test_unit_accessors():
    d = Duration(Duration.HOUR)
    assert d.hours() == 1.0
    assert d.minutes() == 60.0
    assert d.seconds() == 3600.0
    assert d.nanoseconds() == Duration.HOUR


def test_integer_accessors_truncate_toward_zero():
    assert Duration(-1500 * Duration.MICROSECOND).milliseconds() == -1
    assert Duration(1999).microseconds() == 1
    assert (Duration(-5) / 2).nanoseconds() == -2


def test_to_timedelta():
    assert Duration(1500 * Duration.MILLISECOND).to_timedelta() == timedelta(milliseconds=1500)


def test_scalar_multiplication_commutes():
    d = milliseconds(100)
    assert 3 * d == d * 3


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Duration(Duration.SECOND) / 0


def test_add_rejects_non_duration():
    with pytest.raises(TypeError):
        Duration(1) + 1