"""
Timetable adapter: a DataFrame indexed by datetimes or durations carries its own row times.
"""

import pandas as pd

from timetables.base import BaseTimeSeriesSource


class TimetableSource(BaseTimeSeriesSource):
    """DataFrame whose index is a DatetimeIndex or TimedeltaIndex."""

    source_id = "timetable"

    @classmethod
    def accepts(cls, dataset) -> bool:
        return isinstance(dataset, pd.DataFrame) and isinstance(
            dataset.index, (pd.DatetimeIndex, pd.TimedeltaIndex)
        )

    def resolve_time_axis(self) -> pd.Index:
        return self._frame.index
