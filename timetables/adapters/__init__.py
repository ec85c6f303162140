"""Built-in dataset adapters."""

from timetables.adapters.table import TableSource
from timetables.adapters.timetable import TimetableSource

__all__ = ["TableSource", "TimetableSource"]
