"""Row mode: keep whole lines by their position in the input."""

from slc.slicers.base import Slicer


class RowSlicer(Slicer):
    """Emit each retained line exactly as it was read."""

    unit = "row"

    def select(self, line: str, index: int) -> str | None:
        if self.filters.retains(index):
            return line
        return None
