"""
Explicit figure state for ttplot renders, in place of pyplot's implicit current figure.
"""

import io
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from visualization.config import get_settings


class FigureContext:
    """
    One matplotlib figure plus the axes created by the last render.

    After a stacked render the context is flagged for a single-panel reset:
    the next single_axis() call clears the figure and starts from one
    full-figure axes.
    """

    def __init__(self, figure: Figure):
        self.figure = figure
        self.axes: list[Axes] = []
        self._reset_pending = False

    @classmethod
    def new(cls, figsize: tuple[float, float] | None = None) -> "FigureContext":
        return cls(plt.figure(figsize=figsize or get_settings().figsize))

    @property
    def reset_pending(self) -> bool:
        return self._reset_pending

    def request_reset(self) -> None:
        self._reset_pending = True

    def clear(self) -> None:
        self.figure.clf()
        self.axes = []
        self._reset_pending = False

    def single_axis(self) -> Axes:
        """Return the figure's only axes, clearing the figure first if needed."""
        if self._reset_pending or len(self.figure.axes) != 1:
            self.clear()
            self.axes = [self.figure.add_subplot(1, 1, 1)]
        return self.figure.axes[0]

    def savefig(self, target: str | Path | io.IOBase, dpi: int | None = None) -> None:
        """Save to a path (parent directories created) or to a binary stream as PNG."""
        dpi = dpi or get_settings().dpi
        if isinstance(target, (str, Path)):
            Path(target).parent.mkdir(parents=True, exist_ok=True)
            self.figure.savefig(target, dpi=dpi)
        else:
            self.figure.savefig(target, format="png", dpi=dpi)

    def close(self) -> None:
        plt.close(self.figure)
