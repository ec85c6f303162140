"""
Plot the numeric columns of a time-indexed dataset as stacked line charts.
Each numeric column gets its own subplot; all subplots share one time axis,
and only the bottom one shows time tick labels.
"""

import io
import logging
import re
from pathlib import Path

import matplotlib
import numpy as np
import pandas as pd

from timetables import as_source
from timetables.base import BaseTimeSeriesSource
from timetables.columns import is_temporal
from timetables.errors import UnsupportedPlatformError, UnsupportedTimeRepresentationError
from visualization.context import FigureContext
from visualization.formatting import (
    format_time_axis,
    hide_x_tick_labels,
    hide_y_tick_labels,
    set_row_label,
    time_values,
)
from visualization.layout import stack_axes

logger = logging.getLogger(__name__)

# Native datetime64 plotting and ConciseDateFormatter are both stable from here on
MIN_MATPLOTLIB = (3, 5)


def _require_platform(version: str | None = None) -> None:
    """Raise UnsupportedPlatformError if matplotlib is older than MIN_MATPLOTLIB."""
    version = version or matplotlib.__version__
    match = re.match(r"(\d+)\.(\d+)", version)
    if match is None or (int(match.group(1)), int(match.group(2))) < MIN_MATPLOTLIB:
        required = ".".join(str(p) for p in MIN_MATPLOTLIB)
        raise UnsupportedPlatformError(f"Requires matplotlib {required} or later, found {version}")


def _coerce_time(time, row_count: int) -> pd.Index:
    """Validate an explicitly supplied time axis."""
    index = time if isinstance(time, pd.Index) else pd.Index(time)
    if not is_temporal(index):
        raise UnsupportedTimeRepresentationError(
            f"Time axis must hold datetimes or durations, got dtype {index.dtype}"
        )
    if len(index) != row_count:
        raise ValueError(f"Time axis has {len(index)} entries but the dataset has {row_count} rows")
    return index


def _resolve_time(source: BaseTimeSeriesSource, time) -> pd.Index:
    if time is not None:
        return _coerce_time(time, source.row_count)
    index = source.resolve_time_axis()
    if not is_temporal(index):
        raise UnsupportedTimeRepresentationError(
            f"{source.source_id} row times must hold datetimes or durations, got dtype {index.dtype}"
        )
    return index


def _values(source: BaseTimeSeriesSource, name) -> np.ndarray:
    return source.column_values(name).to_numpy(dtype="float64", na_value=np.nan)


def _finish(context: FigureContext, path, dpi: int | None) -> FigureContext:
    if path is not None:
        context.savefig(path, dpi=dpi)
    return context


def ttplot(
    dataset,
    time=None,
    *,
    context: FigureContext | None = None,
    figsize: tuple[float, float] | None = None,
    path: str | Path | io.IOBase | None = None,
    dpi: int | None = None,
) -> FigureContext:
    """
    Stacked line plot of the numeric columns in ``dataset``.

    A timetable (DataFrame indexed by datetimes or durations) uses its index as
    the time axis. A plain table uses its first datetime or duration column.
    Non-numeric columns are ignored.

    Args:
        dataset: Timetable, table, or mapping of column name -> values.
        time: Optional explicit time axis; overrides the one in ``dataset``.
        context: Figure to draw into; a new one is created if None.
        figsize: Size for a newly created figure (width, height).
        path: If set, save the figure there (path or binary stream).
        dpi: Resolution for saving; defaults to TTPLOT_DPI.

    Returns:
        The FigureContext; ``context.axes`` holds one subplot per numeric
        column, top to bottom in column order.

    Raises:
        MissingTimeAxisError: table without a datetime or duration column.
        UnsupportedTimeRepresentationError: time values are not datetimes or durations.
        UnsupportedPlatformError: matplotlib is too old.
    """
    _require_platform()
    source = as_source(dataset)
    time_axis = _resolve_time(source, time)
    names = source.numeric_columns()

    x = time_values(time_axis)
    context = context or FigureContext.new(figsize)
    context.clear()

    nplots = len(names)
    if nplots == 0:
        logger.warning("ttplot: no numeric columns to plot (columns=%s)", source.columns)

    for j, name in enumerate(names, start=1):
        sharex = context.axes[0] if context.axes else None
        ax = context.figure.add_subplot(nplots, 1, j, sharex=sharex)
        ax.plot(x, _values(source, name), linestyle="-", marker="")
        hide_y_tick_labels(ax)
        set_row_label(ax, name)
        if j < nplots:
            hide_x_tick_labels(ax)
        context.axes.append(ax)

    if context.axes:
        format_time_axis(context.axes[0], time_axis)
    stack_axes(context.axes)
    context.request_reset()

    logger.info(
        "ttplot source=%s rows=%s subplots=%s time=%s",
        source.source_id,
        source.row_count,
        nplots,
        type(time_axis).__name__,
    )
    return _finish(context, path, dpi)


def plot_overlay(
    dataset,
    time=None,
    *,
    context: FigureContext | None = None,
    figsize: tuple[float, float] | None = None,
    path: str | Path | io.IOBase | None = None,
    dpi: int | None = None,
) -> FigureContext:
    """
    All numeric columns on one shared vertical axis, with a legend of column names.
    Time axis resolution and errors are the same as ttplot.
    """
    _require_platform()
    source = as_source(dataset)
    time_axis = _resolve_time(source, time)
    names = source.numeric_columns()

    x = time_values(time_axis)
    context = context or FigureContext.new(figsize)
    context.clear()
    ax = context.single_axis()

    for name in names:
        ax.plot(x, _values(source, name), linestyle="-", label=str(name))
    if names:
        ax.legend()
        format_time_axis(ax, time_axis)
    else:
        logger.warning("plot_overlay: no numeric columns to plot (columns=%s)", source.columns)

    return _finish(context, path, dpi)


def plot_to_bytes(
    dataset,
    time=None,
    *,
    overlay: bool = False,
    figsize: tuple[float, float] | None = None,
    dpi: int | None = None,
) -> bytes:
    """Render to PNG bytes (e.g. for serving in a web page) and close the figure."""
    render = plot_overlay if overlay else ttplot
    context = FigureContext.new(figsize)
    try:
        buf = io.BytesIO()
        render(dataset, time, context=context, path=buf, dpi=dpi)
        return buf.getvalue()
    finally:
        context.close()
