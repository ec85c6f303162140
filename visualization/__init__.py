"""
Plotting for time-indexed tables: stacked subplots (ttplot) or one overlaid axes.
Selects the matplotlib backend from TTPLOT_BACKEND before pyplot is imported.
"""

from visualization.config import configure

configure()

from visualization.context import FigureContext  # noqa: E402
from visualization.plotter import plot_overlay, plot_to_bytes, ttplot  # noqa: E402

__all__ = ["FigureContext", "plot_overlay", "plot_to_bytes", "ttplot"]
