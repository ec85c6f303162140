"""
Cosmetic formatting for stacked time-series axes.
"""

import matplotlib.dates as mdates
import numpy as np
import pandas as pd
from matplotlib.axes import Axes
from matplotlib.ticker import FuncFormatter


def format_duration(seconds: float, _pos=None) -> str:
    """Render elapsed seconds as [-][d days ]HH:MM:SS."""
    sign = "-" if seconds < 0 else ""
    total = int(round(abs(seconds)))
    days, rem = divmod(total, 86400)
    hours, rem = divmod(rem, 3600)
    minutes, secs = divmod(rem, 60)
    prefix = f"{days} days " if days else ""
    return f"{sign}{prefix}{hours:02d}:{minutes:02d}:{secs:02d}"


def time_values(time: pd.Index) -> np.ndarray:
    """
    x values for plotting: datetime64 (UTC for tz-aware times), or elapsed
    seconds for durations. Missing times become NaT/NaN and show as gaps.
    """
    if isinstance(time, pd.TimedeltaIndex):
        return time.total_seconds().to_numpy()
    if time.tz is not None:
        time = time.tz_convert(None)
    return time.to_numpy()


def format_time_axis(ax: Axes, time: pd.Index) -> None:
    """Pick tick locator/formatter for the x axis (shared by stacked subplots)."""
    if isinstance(time, pd.TimedeltaIndex):
        ax.xaxis.set_major_formatter(FuncFormatter(format_duration))
        return
    locator = mdates.AutoDateLocator()
    ax.xaxis.set_major_locator(locator)
    ax.xaxis.set_major_formatter(mdates.ConciseDateFormatter(locator))


def set_row_label(ax: Axes, name) -> None:
    """Horizontal y label, right aligned against the axis like a row header."""
    ax.set_ylabel(str(name), rotation=0, horizontalalignment="right", verticalalignment="center")


def hide_y_tick_labels(ax: Axes) -> None:
    ax.tick_params(axis="y", labelleft=False)


def hide_x_tick_labels(ax: Axes) -> None:
    ax.tick_params(axis="x", labelbottom=False)
