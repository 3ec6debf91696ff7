import pytest

from vcutil.optional import (
    assertion,
    bool_to_int,
    equal_values,
    int_assertion,
    int_to_bool,
    must,
    non_default_or,
    none_if_zero,
    value_or,
)


def test_value_or():
    assert value_or(123, 123) == 123
    assert value_or(None, 321) == 321


def test_value_or_keeps_present_value():
    assert value_or("123") == "123"
    assert value_or(None) is None


def test_none_if_zero():
    assert none_if_zero("123") == "123"
    assert none_if_zero(0) is None
    assert none_if_zero("") is None
    assert none_if_zero(0.0) is None


def test_equal_values():
    assert equal_values(None, None) is True
    assert equal_values(None, 1) is False
    assert equal_values(1, None) is False
    assert equal_values(3, 3) is True
    assert equal_values("a", "b") is False


def test_bool_int_conversions():
    assert bool_to_int(True) == 1
    assert bool_to_int(False) == 0
    assert int_to_bool(5) is True
    assert int_to_bool(0) is False
    assert int_to_bool(-1) is False


def test_non_default_or():
    assert non_default_or(0, 7) == 7
    assert non_default_or(3, 7) == 3
    assert non_default_or("", "x") == "x"
    assert non_default_or(None, "x") == "x"


def test_int_assertion():
    assert int_assertion(42) == (42, True)
    assert int_assertion(True) == (0, False)
    assert int_assertion("42") == (0, False)
    assert int_assertion(1.5) == (0, False)


def test_assertion():
    assert assertion("abc", str) == "abc"
    assert assertion(5, str) == ""
    assert assertion("abc", int) == 0


def test_must():
    assert must(lambda: 10) == 10

    def fail():
        raise ValueError("bad")

    with pytest.raises(ValueError):
        must(fail)