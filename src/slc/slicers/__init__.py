"""Slicer registry."""

from slc.configuration import SliceMode
from slc.slicers.base import Slicer, SliceStats
from slc.slicers.columns import ColumnSlicer
from slc.slicers.rows import RowSlicer

SLICERS: dict[SliceMode, type[Slicer]] = {
    SliceMode.ROWS: RowSlicer,
    SliceMode.COLUMNS: ColumnSlicer,
}

__all__ = [
    "SLICERS",
    "ColumnSlicer",
    "RowSlicer",
    "SliceStats",
    "Slicer",
]
