"""Tests for string-to-number conversion."""

import pytest

from vcfg_core.strconv import parse_float, parse_int, strtofloat, strtoint
from vcfg_core.values import Invalid


# ---------------------------------------------------------------------------
# parse_int
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("text, expected", [
    ("42", 42),
    ("-7", -7),
    ("0", 0),
    ("12abc", 12),
    ("3.9", 3),
    ("9223372036854775808", 9223372036854775808),
])
def test_parse_int(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["", "-", "abc", " 1", "+1", ".5", "--1"])
def test_parse_int_invalid(text):
    assert parse_int(text) is Invalid


# ---------------------------------------------------------------------------
# parse_float
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("text, expected", [
    ("66.99", 66.99),
    ("-2.5", -2.5),
    ("10", 10.0),
    (".5", 0.5),
    ("-.25", -0.25),
    ("1.2.3", 1.2),
    ("7.", 7.0),
    ("3.14xyz", 3.14),
])
def test_parse_float(text, expected):
    assert parse_float(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "-", "abc", "e5", " 1.0"])
def test_parse_float_invalid(text):
    assert parse_float(text) is Invalid


def test_parse_float_lone_dot_is_zero():
    assert parse_float(".") == 0.0


# ---------------------------------------------------------------------------
# Legacy converters
# ---------------------------------------------------------------------------

def test_strtoint_legacy_sentinel():
    assert strtoint("abc") == -1
    assert strtoint(None) == -1
    assert strtoint("-1") == -1
    assert strtoint("15") == 15


def test_strtofloat_legacy_sentinel():
    assert strtofloat("abc") == -1.0
    assert strtofloat(None) == -1.0
    assert strtofloat("0.5") == pytest.approx(0.5)
