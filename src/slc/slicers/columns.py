"""Column mode: keep whitespace-delimited tokens by their position in each line."""

import re

from slc.slicers.base import Slicer

# Runs of characters outside the Unicode White_Space property. `str.split()` would also
# break on the information separators \x1c-\x1f, which are not whitespace.
_TOKEN = re.compile(r"[^\t\n\v\f\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+")


def split_columns(line: str) -> list[str]:
    """Split `line` into its whitespace-delimited tokens."""
    return _TOKEN.findall(line)


class ColumnSlicer(Slicer):
    """Emit the retained tokens of every line.

    When no filters are given the line is passed through verbatim. Otherwise the
    kept tokens are joined by a single space and terminated by one newline, which
    normalises spacing and line endings even if no token is dropped.
    """

    unit = "column"

    def select(self, line: str, index: int) -> str | None:  # noqa: ARG002
        if self.filters.is_empty():
            return line

        tokens = split_columns(line)
        kept = [token for position, token in enumerate(tokens, start=1) if self.filters.retains(position)]
        return " ".join(kept) + "\n"
