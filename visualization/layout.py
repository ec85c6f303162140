"""
Stacked-axis geometry: resize subplots so each one touches the one above.
"""

from collections.abc import Sequence

from matplotlib.axes import Axes

Box = tuple[float, float, float, float]  # (x0, y0, width, height) in figure fraction


def tighten_heights(boxes: Sequence[Box]) -> list[Box]:
    """
    Give every box the height of the gap between the first two y-origins.

    Boxes are ordered top to bottom. x0, y0 and width are kept, so evenly
    spaced boxes end up abutting. Fewer than two boxes are returned unchanged.
    """
    boxes = [tuple(box) for box in boxes]
    if len(boxes) < 2:
        return boxes
    # First gap only, even if the spacing below differs
    height = boxes[0][1] - boxes[1][1]
    return [(x0, y0, width, height) for x0, y0, width, _ in boxes]


def stack_axes(axes: Sequence[Axes]) -> None:
    """Apply tighten_heights to the axes' current positions."""
    boxes = [ax.get_position().bounds for ax in axes]
    for ax, box in zip(axes, tighten_heights(boxes)):
        ax.set_position(box)
