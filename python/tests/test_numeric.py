import pytest

from pickles.utils.numeric import looks_numeric, numeric_prefix


@pytest.mark.parametrize("value, expected", [
    ("16px", 16.0),
    ("-3.5rem", -3.5),
    ("2x", 2.0),
    ("1.", 1.0),
    ("42", 42.0),
    ("px", 0),
    (".5", 0),
    (" 5", 0),
    ("", 0),
])
def test_text_prefix(value, expected):
    assert numeric_prefix(value) == expected


def test_numbers_pass_through_unchanged():
    assert numeric_prefix(7) == 7
    assert isinstance(numeric_prefix(7), int)
    assert numeric_prefix(-2.25) == -2.25


def test_non_numeric_types_are_zero():
    assert numeric_prefix(True) == 0
    assert numeric_prefix(None) == 0
    assert numeric_prefix({"a": 1}) == 0
    assert numeric_prefix([1, 2]) == 0


def test_looks_numeric():
    assert looks_numeric("12px")
    assert looks_numeric("-1")
    assert not looks_numeric("-x")
    assert not looks_numeric("px12")
