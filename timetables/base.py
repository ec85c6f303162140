"""
Abstract base for dataset adapters.
Each adapter knows where a dataset keeps its row times and which columns to plot.
"""

from abc import ABC, abstractmethod

import pandas as pd

from timetables.columns import ColumnKind, classify_frame


class BaseTimeSeriesSource(ABC):
    """Read-only view over one tabular dataset: time axis plus numeric columns."""

    # Adapter identifier used by the router registry (e.g. "timetable", "table")
    source_id: str = ""

    def __init__(self, frame: pd.DataFrame):
        if frame.columns.has_duplicates:
            dupes = sorted({str(c) for c in frame.columns[frame.columns.duplicated()]})
            raise ValueError(f"Column names must be unique; duplicated: {dupes}")
        self._frame = frame

    @classmethod
    @abstractmethod
    def accepts(cls, dataset) -> bool:
        """True if this adapter can wrap ``dataset`` as given."""
        ...

    @classmethod
    def from_dataset(cls, dataset) -> "BaseTimeSeriesSource":
        """Build the adapter from a dataset that ``accepts`` returned True for."""
        return cls(dataset)

    @abstractmethod
    def resolve_time_axis(self) -> pd.Index:
        """
        Return the row times as a DatetimeIndex or TimedeltaIndex.

        Raises:
            MissingTimeAxisError: no row times can be found.
            UnsupportedTimeRepresentationError: row times exist but are not
                datetime-like or duration-like.
        """
        ...

    @property
    def columns(self) -> list[str]:
        return list(self._frame.columns)

    @property
    def row_count(self) -> int:
        return len(self._frame)

    def column_values(self, name: str) -> pd.Series:
        return self._frame[name]

    def numeric_columns(self) -> list[str]:
        """Numeric column names in original order; everything else is skipped."""
        return [name for name, kind in classify_frame(self._frame) if kind is ColumnKind.NUMERIC]
