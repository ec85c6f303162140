"""
Column type introspection used to pick the time column and the columns to plot.
"""

from enum import Enum

import pandas as pd
from pandas.api import types as ptypes


class ColumnKind(str, Enum):
    NUMERIC = "numeric"
    TEMPORAL = "temporal"
    OTHER = "other"


def is_temporal(values) -> bool:
    """True for datetime64 (naive or tz-aware) and timedelta64 values."""
    return ptypes.is_datetime64_any_dtype(values) or ptypes.is_timedelta64_dtype(values)


def is_numeric(values) -> bool:
    """
    True for plottable numbers. Booleans are excluded, and so are timedeltas,
    which pandas otherwise reports as numeric.
    """
    if is_temporal(values) or ptypes.is_bool_dtype(values):
        return False
    return ptypes.is_numeric_dtype(values)


def classify_column(values: pd.Series) -> ColumnKind:
    if is_temporal(values):
        return ColumnKind.TEMPORAL
    if is_numeric(values):
        return ColumnKind.NUMERIC
    return ColumnKind.OTHER


def classify_frame(frame: pd.DataFrame) -> list[tuple[str, ColumnKind]]:
    """Return (column, kind) pairs in the frame's column order."""
    return [(name, classify_column(frame[name])) for name in frame.columns]
