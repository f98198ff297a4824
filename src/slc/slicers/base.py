"""Abstract base class for line slicers."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from loguru import logger

from slc.errors import SliceFailedError
from slc.filterset import FilterSet


@dataclass
class SliceStats:
    """Counters for a single slicing run."""

    lines_read: int = 0
    lines_written: int = 0


class Slicer(ABC):
    """Base class for a slicer that streams lines from a reader to a writer.

    Subclasses only decide what to emit for each line; the base class owns the
    read/filter/write loop, the line counter and the final flush.
    """

    # Human readable name of the positions being filtered, used in logs.
    unit: str = "position"

    def __init__(self, filters: FilterSet | None = None) -> None:
        """Constructor for the slicer.

        Args:
            filters (FilterSet | None): The filters to apply. `None` or an empty set retains everything.
        """
        self.filters = filters if filters is not None else FilterSet.unfiltered()

    @abstractmethod
    def select(self, line: str, index: int) -> str | None:
        """Return the text to write for `line`, or None to drop it.

        Args:
            line (str): The line as read, including its terminator.
            index (int): The 1-based position of the line in the input.
        """

    def slice(self, reader: Iterable[str], writer: TextIO) -> SliceStats:
        """Read every line of `reader`, writing the selected output to `writer`.

        Args:
            reader (Iterable[str]): The line source, consumed exactly once.
            writer (TextIO): The output sink. It is flushed once after the input is exhausted.

        Returns:
            SliceStats: The number of lines read and written.

        Raises:
            SliceFailedError: If reading or writing fails. Output already written is not retracted.
        """
        stats = SliceStats()
        logger.debug(f"Slicing {self.unit}s with {len(self.filters)} filter(s): {self.filters!r}")

        try:
            for index, line in enumerate(reader, start=1):
                stats.lines_read += 1
                out = self.select(line, index)
                if out is not None:
                    writer.write(out)
                    stats.lines_written += 1

            writer.flush()
        except (OSError, UnicodeDecodeError) as exc:
            raise SliceFailedError(exc) from exc

        logger.debug(f"Read {stats.lines_read} line(s), wrote {stats.lines_written}")
        return stats
