"""
Wrap tabular datasets for stacked time-series plotting.
Route by input shape and delegate to an adapter that resolves the time axis
and lists the numeric columns.
"""

from timetables.base import BaseTimeSeriesSource
from timetables.columns import ColumnKind, classify_column
from timetables.errors import (
    MissingTimeAxisError,
    TtplotError,
    UnsupportedPlatformError,
    UnsupportedTimeRepresentationError,
)
from timetables.router import as_source, register_adapter

# Register built-in adapters; timetables first so an index of row times wins over columns
from timetables.adapters.timetable import TimetableSource
from timetables.adapters.table import TableSource

register_adapter(TimetableSource)
register_adapter(TableSource)

__all__ = [
    "BaseTimeSeriesSource",
    "ColumnKind",
    "MissingTimeAxisError",
    "TableSource",
    "TimetableSource",
    "TtplotError",
    "UnsupportedPlatformError",
    "UnsupportedTimeRepresentationError",
    "as_source",
    "classify_column",
    "register_adapter",
]
