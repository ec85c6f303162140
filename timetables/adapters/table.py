"""
Table adapter: row times are taken from the first datetime or duration column.
Plain mappings of column name -> values are accepted and converted to a DataFrame.
"""

import logging
from collections.abc import Mapping

import pandas as pd

from timetables.base import BaseTimeSeriesSource
from timetables.columns import ColumnKind, classify_frame
from timetables.errors import MissingTimeAxisError

logger = logging.getLogger(__name__)


class TableSource(BaseTimeSeriesSource):
    """Plain table; the time axis is inferred from its columns."""

    source_id = "table"

    @classmethod
    def accepts(cls, dataset) -> bool:
        return isinstance(dataset, (pd.DataFrame, Mapping))

    @classmethod
    def from_dataset(cls, dataset) -> "TableSource":
        if isinstance(dataset, pd.DataFrame):
            return cls(dataset)
        return cls(pd.DataFrame(dict(dataset)))

    def time_column(self) -> str:
        """Name of the first temporal column; raise MissingTimeAxisError if there is none."""
        for name, kind in classify_frame(self._frame):
            if kind is ColumnKind.TEMPORAL:
                return name
        raise MissingTimeAxisError(
            "Input table must contain a datetime or duration column for row times. "
            f"Columns: {self.columns}"
        )

    def resolve_time_axis(self) -> pd.Index:
        name = self.time_column()
        logger.debug("table time axis: column=%s", name)
        return pd.Index(self._frame[name], name=name)
