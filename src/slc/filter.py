"""Parsing of a single filter expression.

A filter selects one position or one inclusive range of 1-based positions:

    n      exactly position n
    n:m    positions n through m
    n:     position n through the end of the sequence
    :m     position 1 through m
    :      every position
"""

from dataclasses import dataclass
from enum import Enum

from slc.errors import IntegerParseError, InvalidFilterError


class FilterKind(str, Enum):
    """The shape of a filter, taken from the syntax it was written in."""

    EXACT = "exact"
    RANGE = "range"
    RANGE_FROM = "range_from"
    RANGE_TO = "range_to"
    FULL = "full"


@dataclass(frozen=True)
class Filter:
    """A single parsed rule describing the positions to retain.

    `end` is inclusive. It is `None` only for filters without an upper bound
    (`RANGE_FROM` and `FULL`), so there is no sentinel value to confuse with a real position.
    """

    kind: FilterKind
    start: int
    end: int | None

    def __post_init__(self) -> None:
        if self.start < 1:
            msg = f"start [{self.start}] must be at least 1, positions are numbered from 1"
            raise InvalidFilterError(msg)
        if self.end is not None and self.end < self.start:
            msg = f"end [{self.end}] cannot be before start [{self.start}]"
            raise InvalidFilterError(msg)
        if self.kind in (FilterKind.RANGE_FROM, FilterKind.FULL) and self.end is not None:
            msg = f"{self.kind.value} filter cannot have an end [{self.end}]"
            raise InvalidFilterError(msg)
        if self.kind not in (FilterKind.RANGE_FROM, FilterKind.FULL) and self.end is None:
            msg = f"{self.kind.value} filter requires an end"
            raise InvalidFilterError(msg)
        if self.kind == FilterKind.EXACT and self.end != self.start:
            msg = f"exact filter must end where it starts [{self.start}]"
            raise InvalidFilterError(msg)
        if self.kind in (FilterKind.RANGE_TO, FilterKind.FULL) and self.start != 1:
            msg = f"{self.kind.value} filter must start at 1"
            raise InvalidFilterError(msg)

    @classmethod
    def exact(cls, position: int) -> "Filter":
        return cls(FilterKind.EXACT, position, position)

    @classmethod
    def closed(cls, start: int, end: int) -> "Filter":
        return cls(FilterKind.RANGE, start, end)

    @classmethod
    def range_from(cls, start: int) -> "Filter":
        return cls(FilterKind.RANGE_FROM, start, None)

    @classmethod
    def range_to(cls, end: int) -> "Filter":
        return cls(FilterKind.RANGE_TO, 1, end)

    @classmethod
    def full(cls) -> "Filter":
        return cls(FilterKind.FULL, 1, None)

    @property
    def is_open_ended(self) -> bool:
        """True if the filter runs to the end of the sequence."""
        return self.end is None

    @property
    def sentinel_end(self) -> int | None:
        """The end in its legacy tri-state form: None for exact, 0 for open-ended, else the end."""
        if self.kind == FilterKind.EXACT:
            return None
        if self.end is None:
            return 0
        return self.end

    def contains(self, position: int) -> bool:
        """Return whether `position` falls inside this filter."""
        if position < self.start:
            return False
        return self.end is None or position <= self.end

    def __str__(self) -> str:
        if self.kind == FilterKind.EXACT:
            return str(self.start)
        if self.kind == FilterKind.RANGE:
            return f"{self.start}:{self.end}"
        if self.kind == FilterKind.RANGE_FROM:
            return f"{self.start}:"
        if self.kind == FilterKind.RANGE_TO:
            return f":{self.end}"
        return ":"


def _parse_position(token: str) -> int:
    # Only plain ASCII digits; `int()` alone would accept signs, whitespace and underscores.
    if not token or not (token.isascii() and token.isdigit()):
        raise IntegerParseError(token)
    return int(token)


def parse_filter(text: str) -> Filter:
    """Parse one filter expression of the form `[start][:[end]]`.

    Args:
        text (str): The filter expression, e.g. `"3"`, `"3:5"`, `"3:"`, `":5"` or `":"`.

    Returns:
        Filter: The parsed filter.

    Raises:
        IntegerParseError: If the start or end is not a non-negative integer literal.
        InvalidFilterError: If the range is inverted, starts at 0 or has more than one colon.
    """
    parts = text.split(":")

    if len(parts) > 2:
        msg = f"expected at most one ':' in filter [{text}]"
        raise InvalidFilterError(msg)

    left = parts[0]

    if len(parts) == 1:
        # An empty argument defaults to the first position.
        if left == "":
            return Filter.exact(1)
        return Filter.exact(_parse_position(left))

    right = parts[1]
    start = 1 if left == "" else _parse_position(left)

    if right == "":
        if left == "":
            return Filter.full()
        return Filter.range_from(start)

    end = _parse_position(right)
    if left == "":
        return Filter.range_to(end)
    return Filter.closed(start, end)
