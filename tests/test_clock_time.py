import copy

import pytest

from labkit.clock_time import Time, parse_time


def parts(t):
    return (t.hours, t.minutes, t.seconds)


def test_default_constructor():
    assert parts(Time()) == (0, 0, 0)


def test_parameterized_constructor():
    assert parts(Time(10, 15, 30)) == (10, 15, 30)


def test_copy_constructor():
    t1 = Time(10, 15, 30)
    t2 = copy.copy(t1)
    assert parts(t2) == parts(t1)
    assert t2 is not t1


def test_add_seconds_in_place():
    t = Time(1, 59, 50)
    t += 20
    assert parts(t) == (2, 0, 10)


def test_add_seconds_to_object():
    t2 = Time(2, 30, 45) + 75
    assert parts(t2) == (2, 32, 0)


def test_add_seconds_on_the_left():
    t2 = 75 + Time(2, 30, 45)
    assert parts(t2) == (2, 32, 0)


def test_add_objects_in_place():
    t1 = Time(2, 30, 45)
    t1 += Time(1, 45, 30)
    assert parts(t1) == (4, 16, 15)


def test_add_objects():
    assert parts(Time(2, 30, 45) + Time(1, 45, 30)) == (4, 16, 15)


def test_subtract_seconds_in_place():
    t = Time(2, 0, 10)
    t -= 20
    assert parts(t) == (1, 59, 50)


def test_subtract_seconds_from_object():
    t2 = Time(2, 0, 10) - 15
    assert parts(t2) == (1, 59, 55)


def test_subtract_with_seconds_on_the_left_matches_right():
    t = Time(2, 0, 10)
    assert 15 - t == t - 15


def test_subtract_objects():
    result = Time(2, 30, 45) - Time(1, 45, 30)
    assert parts(result) == (0, 45, 15)


def test_subtract_objects_in_place():
    t = Time(2, 30, 45)
    t -= Time(1, 45, 30)
    assert parts(t) == (0, 45, 15)


def test_equality():
    assert Time(2, 30, 45) == Time(2, 30, 45)
    assert not Time(2, 30, 45) == Time(1, 45, 30)


def test_normalize_positive():
    assert parts(Time(25, 61, 3665)) == (3, 2, 5)


def test_normalize_negative():
    assert parts(Time(-1, -61, -3665)) == (20, 57, 55)


def test_object_count():
    initial = Time.live_count()
    t1, t2, t3 = Time(), Time(), Time()
    assert Time.live_count() == initial + 3
    t4 = Time()
    assert Time.live_count() == initial + 4
    del t4
    assert Time.live_count() == initial + 3
    del t1, t2, t3
    assert Time.live_count() == initial


def test_to_seconds():
    assert Time(1, 2, 1).to_seconds() == 3721


def test_wraps_past_midnight():
    assert parts(Time(23, 59, 59) + 1) == (0, 0, 0)


def test_hours_setter_normalises():
    t = Time(0, 0, 0)
    t.hours = 26
    assert parts(t) == (2, 0, 0)


def test_str_and_describe():
    t = Time(3, 1, 1)
    assert str(t) == "3:1:1"
    assert t.describe() == "H:3 M:1 S:1"


def test_parse_time_round_trip():
    t = Time(12, 34, 56)
    assert parse_time(str(t)) == t


def test_parse_time_any_separator():
    assert parts(parse_time("1.2-3")) == (1, 2, 3)


def test_parse_time_rejects_garbage():
    with pytest.raises(ValueError):
        parse_time("noon")


def test_add_unsupported_type():
    with pytest.raises(TypeError):
        Time() + 1.5