"""The union of all filters supplied for one run."""

from collections.abc import Iterable, Iterator

from slc.filter import Filter, parse_filter


class FilterSet:
    """An ordered, immutable collection of filters evaluated as a union.

    An empty set means "no filtering requested". `apply` on an empty set matches
    nothing, so callers that want "retain everything" semantics should use `retains`.
    """

    def __init__(self, filters: Iterable[Filter] = ()) -> None:
        self._filters: tuple[Filter, ...] = tuple(filters)

    @classmethod
    def parse(cls, texts: Iterable[str]) -> "FilterSet":
        """Parse every filter expression in `texts`, failing on the first bad one."""
        return cls(parse_filter(text) for text in texts)

    @classmethod
    def unfiltered(cls) -> "FilterSet":
        """The distinguished empty set that retains every position."""
        return cls()

    @property
    def filters(self) -> tuple[Filter, ...]:
        return self._filters

    def apply(self, position: int) -> bool:
        """Return True if `position` matches at least one filter.

        Filters are checked in order and evaluation stops at the first match.
        """
        _check_position(position)
        for flt in self._filters:
            if position < flt.start:
                continue
            if flt.end is None:
                return True
            if position <= flt.end:
                return True
        return False

    def retains(self, position: int) -> bool:
        """Return True if `position` should be kept, treating an empty set as "keep everything"."""
        if self.is_empty():
            _check_position(position)
            return True
        return self.apply(position)

    def is_empty(self) -> bool:
        return not self._filters

    def __len__(self) -> int:
        return len(self._filters)

    def __iter__(self) -> Iterator[Filter]:
        return iter(self._filters)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilterSet):
            return NotImplemented
        return self._filters == other._filters

    def __hash__(self) -> int:
        return hash(self._filters)

    def __repr__(self) -> str:
        return f"FilterSet([{', '.join(repr(str(f)) for f in self._filters)}])"


def _check_position(position: int) -> None:
    if position < 1:
        msg = f"positions are numbered from 1, got {position}"
        raise ValueError(msg)
