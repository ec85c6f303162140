from __future__ import annotations

import logging
import re
from datetime import datetime

import numpy as np
import pandas as pd
import pytest

from timetables import MissingTimeAxisError, UnsupportedPlatformError, UnsupportedTimeRepresentationError
from timetables.samples import SAMPLE_COLUMNS, sample_table, sample_timetable
from visualization import FigureContext, plot_overlay, plot_to_bytes, ttplot
from visualization.plotter import _require_platform


def _draw(context: FigureContext) -> None:
    context.figure.canvas.draw()


def test_documented_example_stacks_one_subplot_per_column() -> None:
    context = ttplot(sample_timetable(seed=0))
    _draw(context)

    assert len(context.axes) == 5
    assert context.figure.axes == context.axes
    assert [ax.get_ylabel() for ax in context.axes] == list(SAMPLE_COLUMNS)
    assert pd.Timestamp(context.axes[0].lines[0].get_xdata()[0]) == pd.Timestamp("2016-08-01")


def test_only_bottom_subplot_shows_time_labels() -> None:
    context = ttplot(sample_timetable(seed=0))
    _draw(context)

    for ax in context.axes[:-1]:
        assert ax.get_xticklabels() == []
    bottom = [label.get_text() for label in context.axes[-1].get_xticklabels()]
    assert any(bottom)


def test_y_tick_labels_hidden_and_row_labels_horizontal() -> None:
    context = ttplot(sample_timetable(seed=0))
    _draw(context)

    for ax, name in zip(context.axes, SAMPLE_COLUMNS):
        assert ax.get_yticklabels() == []
        label = ax.yaxis.label
        assert label.get_text() == name
        assert label.get_rotation() == 0
        assert label.get_horizontalalignment() == "right"
        assert label.get_verticalalignment() == "center"


def test_lines_are_solid() -> None:
    context = ttplot(sample_timetable(seed=0))
    for ax in context.axes:
        assert len(ax.lines) == 1
        assert ax.lines[0].get_linestyle() == "-"


def test_subplots_touch_and_share_x_extent() -> None:
    context = ttplot(sample_timetable(seed=0))

    boxes = [ax.get_position().bounds for ax in context.axes]
    for upper, lower in zip(boxes, boxes[1:]):
        assert lower[1] + lower[3] == pytest.approx(upper[1])
        assert lower[0] == pytest.approx(upper[0])
        assert lower[2] == pytest.approx(upper[2])
    assert context.axes[0].get_xlim() == context.axes[-1].get_xlim()


def test_table_input_skips_non_numeric_and_keeps_order() -> None:
    frame = sample_table(seed=0)
    frame.insert(1, "note", ["x"] * len(frame))

    context = ttplot(frame)

    assert [ax.get_ylabel() for ax in context.axes] == list(SAMPLE_COLUMNS)


def test_table_without_time_column_raises_before_drawing() -> None:
    context = FigureContext.new()
    with pytest.raises(MissingTimeAxisError):
        ttplot(pd.DataFrame({"a": [1.0, 2.0], "b": [3.0, 4.0]}), context=context)
    assert context.figure.axes == []
    assert context.axes == []


def test_duration_column_used_as_time_axis() -> None:
    frame = pd.DataFrame(
        {"elapsed": pd.to_timedelta([0, 60, 120], unit="s"), "value": [1.0, 4.0, 9.0]}
    )

    context = ttplot(frame)
    _draw(context)

    assert len(context.axes) == 1
    assert list(context.axes[0].lines[0].get_xdata()) == [0.0, 60.0, 120.0]
    labels = [label.get_text() for label in context.axes[0].get_xticklabels()]
    assert any(re.fullmatch(r"\d\d:\d\d:\d\d", text) for text in labels)


def test_zero_numeric_columns_is_not_an_error(caplog: pytest.LogCaptureFixture) -> None:
    frame = pd.DataFrame({"name": ["a", "b"]}, index=pd.date_range("2020-01-01", periods=2))

    with caplog.at_level(logging.WARNING, logger="visualization.plotter"):
        context = ttplot(frame)

    assert context.axes == []
    assert context.figure.axes == []
    assert "no numeric columns" in caplog.text


def test_explicit_time_axis_overrides_dataset() -> None:
    times = [datetime(2021, 1, d) for d in (1, 2, 3)]
    context = ttplot({"a": [1, 2, 3], "b": [3.0, 2.0, 1.0]}, times)

    assert [ax.get_ylabel() for ax in context.axes] == ["a", "b"]
    assert pd.Timestamp(context.axes[0].lines[0].get_xdata()[0]) == pd.Timestamp("2021-01-01")


def test_explicit_time_axis_must_be_temporal() -> None:
    context = FigureContext.new()
    with pytest.raises(UnsupportedTimeRepresentationError):
        ttplot({"a": [1, 2]}, ["mon", "tue"], context=context)
    assert context.figure.axes == []


def test_explicit_time_axis_length_must_match_rows() -> None:
    with pytest.raises(ValueError, match="2 entries"):
        ttplot({"a": [1, 2, 3]}, pd.date_range("2020-01-01", periods=2))


def test_tz_aware_timetable() -> None:
    frame = pd.DataFrame(
        {"a": [1.0, 2.0, 3.0]}, index=pd.date_range("2020-01-01", periods=3, freq="h", tz="UTC")
    )
    assert len(ttplot(frame).axes) == 1


def test_nullable_integers_plot_with_gaps() -> None:
    frame = pd.DataFrame(
        {"a": pd.array([1, None, 3], dtype="Int64")}, index=pd.date_range("2020-01-01", periods=3)
    )
    ydata = ttplot(frame).axes[0].lines[0].get_ydata()
    assert ydata[0] == 1.0
    assert pd.isna(ydata[1])


def test_render_reuses_context_and_requests_single_panel_reset() -> None:
    context = FigureContext.new()
    ttplot(sample_timetable(seed=0), context=context)
    ttplot(sample_timetable(columns=("A", "B"), seed=0), context=context)

    assert len(context.figure.axes) == 2
    assert context.reset_pending

    ax = context.single_axis()
    assert context.figure.axes == [ax]
    assert len(ax.lines) == 0
    assert not context.reset_pending


def test_overlay_draws_all_columns_on_one_axes() -> None:
    context = plot_overlay(sample_timetable(seed=0))

    assert len(context.figure.axes) == 1
    ax = context.figure.axes[0]
    assert len(ax.lines) == 5
    assert [t.get_text() for t in ax.get_legend().get_texts()] == list(SAMPLE_COLUMNS)


def test_overlay_after_stacked_render_starts_clean() -> None:
    context = ttplot(sample_timetable(seed=0))
    plot_overlay(sample_timetable(seed=0), context=context)
    assert len(context.figure.axes) == 1


def test_plot_to_bytes_returns_png() -> None:
    stacked = plot_to_bytes(sample_timetable(seed=0), dpi=50)
    overlay = plot_to_bytes(sample_table(seed=0), overlay=True, dpi=50)
    assert stacked.startswith(b"\x89PNG")
    assert overlay.startswith(b"\x89PNG")


def test_path_saves_figure_creating_parent(tmp_path) -> None:
    target = tmp_path / "plots" / "tt.png"
    ttplot(sample_timetable(seed=0), path=target, dpi=50)
    assert target.read_bytes().startswith(b"\x89PNG")


@pytest.mark.parametrize("version", ["3.4.3", "2.2.0", "dev"])
def test_old_matplotlib_rejected(version: str) -> None:
    with pytest.raises(UnsupportedPlatformError, match=version):
        _require_platform(version)


def test_current_matplotlib_accepted() -> None:
    _require_platform("3.9.2")
    _require_platform("10.0.0")


def test_missing_row_time_plots_with_a_gap() -> None:
    index = pd.DatetimeIndex(["2020-01-01", pd.NaT, "2020-01-03"])
    frame = pd.DataFrame({"a": [1.0, 2.0, 3.0], "b": [3.0, 2.0, 1.0]}, index=index)

    context = ttplot(frame)
    _draw(context)

    assert len(context.axes) == 2
    xdata = context.axes[0].lines[0].get_xdata()
    assert np.isnat(xdata[1])
    assert pd.Timestamp(xdata[2]) == pd.Timestamp("2020-01-03")


def test_missing_row_time_in_tz_aware_table_column() -> None:
    frame = pd.DataFrame(
        {
            "stamp": pd.DatetimeIndex(["2020-01-01", None, "2020-01-03"]).tz_localize("Europe/Berlin"),
            "a": [1.0, 2.0, 3.0],
        }
    )

    context = plot_overlay(frame)
    _draw(context)

    xdata = context.figure.axes[0].lines[0].get_xdata()
    assert np.isnat(xdata[1])
    assert pd.Timestamp(xdata[0]) == pd.Timestamp("2019-12-31 23:00")
