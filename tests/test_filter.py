"""Tests for parsing a single filter expression."""

import pytest

from slc.errors import FilterParseError, IntegerParseError, InvalidFilterError
from slc.filter import Filter, FilterKind, parse_filter


@pytest.mark.parametrize(
    ("text", "kind", "start", "end"),
    [
        ("1", FilterKind.EXACT, 1, 1),
        ("42", FilterKind.EXACT, 42, 42),
        ("3:5", FilterKind.RANGE, 3, 5),
        ("4:4", FilterKind.RANGE, 4, 4),
        ("3:", FilterKind.RANGE_FROM, 3, None),
        (":3", FilterKind.RANGE_TO, 1, 3),
        (":", FilterKind.FULL, 1, None),
        ("", FilterKind.EXACT, 1, 1),
        ("007", FilterKind.EXACT, 7, 7),
        ("12345678901234567890", FilterKind.EXACT, 12345678901234567890, 12345678901234567890),
    ],
)
def test_parse_valid(text, kind, start, end):
    flt = parse_filter(text)
    assert flt.kind == kind
    assert flt.start == start
    assert flt.end == end


@pytest.mark.parametrize(
    ("text", "sentinel"),
    [("5", None), ("2:7", 7), ("2:", 0), (":7", 7), (":", 0)],
)
def test_sentinel_end(text, sentinel):
    assert parse_filter(text).sentinel_end == sentinel


@pytest.mark.parametrize("text", ["-1", "abc", "1a", "+3", " 3", "3 ", "1:x", "x:3", "1:-2", "1_000", "٣", "1.5"])
def test_parse_rejects_non_integers(text):
    with pytest.raises(IntegerParseError) as excinfo:
        parse_filter(text)
    assert str(excinfo.value).startswith("failed to parse filter: ")


def test_parse_error_message_for_bad_digit():
    with pytest.raises(IntegerParseError, match="invalid digit found in string"):
        parse_filter("-1")


def test_inverted_range_is_invalid():
    with pytest.raises(InvalidFilterError) as excinfo:
        parse_filter("3:2")
    assert str(excinfo.value) == "invalid filter: end [2] cannot be before start [3]"
    assert excinfo.value.reason == "end [2] cannot be before start [3]"


@pytest.mark.parametrize("text", ["0", "0:3", "0:", "3:0", ":0"])
def test_zero_positions_are_invalid(text):
    with pytest.raises(InvalidFilterError):
        parse_filter(text)


@pytest.mark.parametrize("text", ["1:2:3", "::", "1::", ":2:"])
def test_more_than_one_colon_is_rejected(text):
    with pytest.raises(InvalidFilterError, match="at most one ':'"):
        parse_filter(text)


def test_parse_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_filter("nope")
    assert issubclass(IntegerParseError, FilterParseError)
    assert issubclass(InvalidFilterError, FilterParseError)


@pytest.mark.parametrize("text", ["1", "3:5", "3:", ":5", ":"])
def test_str_renders_filter_text(text):
    assert str(parse_filter(text)) == text


def test_contains():
    flt = parse_filter("3:5")
    assert [p for p in range(1, 8) if flt.contains(p)] == [3, 4, 5]

    flt = parse_filter("3:")
    assert not flt.contains(2)
    assert flt.contains(3)
    assert flt.contains(10**9)
    assert flt.is_open_ended


def test_constructors_validate():
    assert Filter.exact(2) == parse_filter("2")
    assert Filter.closed(2, 4) == parse_filter("2:4")
    assert Filter.range_from(2) == parse_filter("2:")
    assert Filter.range_to(4) == parse_filter(":4")
    assert Filter.full() == parse_filter(":")

    with pytest.raises(InvalidFilterError):
        Filter(FilterKind.EXACT, 2, 3)
    with pytest.raises(InvalidFilterError):
        Filter(FilterKind.RANGE_FROM, 2, 5)
    with pytest.raises(InvalidFilterError):
        Filter(FilterKind.RANGE, 2, None)
    with pytest.raises(InvalidFilterError):
        Filter(FilterKind.RANGE_TO, 2, 5)


def test_filters_are_immutable():
    flt = parse_filter("1:2")
    with pytest.raises(AttributeError):
        flt.start = 5
