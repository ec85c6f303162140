"""
Sample datasets matching the documented ttplot example:
25 rows of random data in columns V..Z with daily row times from 2016-08-01.
"""

import numpy as np
import pandas as pd

SAMPLE_COLUMNS = ("V", "W", "X", "Y", "Z")
SAMPLE_START = "2016-08-01"


def sample_timetable(
    rows: int = 25,
    columns: tuple[str, ...] = SAMPLE_COLUMNS,
    *,
    start: str = SAMPLE_START,
    seed: int | None = None,
) -> pd.DataFrame:
    """Random normal data indexed by a daily DatetimeIndex named 'Time'."""
    rng = np.random.default_rng(seed)
    index = pd.date_range(start, periods=rows, freq="D", name="Time")
    return pd.DataFrame(rng.standard_normal((rows, len(columns))), index=index, columns=list(columns))


def sample_table(
    rows: int = 25,
    columns: tuple[str, ...] = SAMPLE_COLUMNS,
    *,
    start: str = SAMPLE_START,
    seed: int | None = None,
) -> pd.DataFrame:
    """Same data as sample_timetable, with row times in a trailing 'Time' column."""
    frame = sample_timetable(rows, columns, start=start, seed=seed).reset_index()
    return frame[list(columns) + ["Time"]]
