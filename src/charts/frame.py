"""Axis framing and final composition shared by the grid-based renderers."""

from __future__ import annotations

import math
from typing import Callable, List, Optional, Sequence

from charts import glyphs
from charts.colors import apply_color
from charts.geometry import PlotArea, center, clamp, normalize, pad_left, write_text
from charts.grid import Grid, Layer
from charts.models import PlotPoint


def draw_value_axis(
    grid: Grid,
    area: PlotArea,
    label_for_row: Callable[[int], str],
    dot_every: int = 0,
) -> None:
    """Draw y-axis labels, the axis connector column and the background.

    Labels are right-aligned in the columns left of the connector, which sits
    at ``area.left - 1``. The last plot row becomes the horizontal axis and,
    when ``dot_every`` is set, every ``dot_every``-th row above it gets a dot
    background.
    """
    axis_col = area.left - 1
    label_width = axis_col
    last_row = area.last_row

    for row in range(area.top, area.top + area.height):
        if label_width > 0:
            label = pad_left(label_for_row(row), label_width)[:label_width]
            write_text(grid, row, 0, label, Layer.LABEL)
        connector = glyphs.axis_connector(row - area.top, last_row - area.top)
        grid.set(row, axis_col, connector, Layer.AXIS)

        for col in range(area.left, grid.width):
            if row == last_row:
                grid.set(row, col, glyphs.HORIZONTAL, Layer.AXIS)
            elif dot_every and (row - area.top) % dot_every == 0:
                grid.set(row, col, glyphs.GRID_DOT, Layer.BACKGROUND)


def axis_value(row: int, rows: int, top_value: float, span: float) -> float:
    """Value shown on the y-axis at ``row`` of a ``rows``-tall plot."""
    if rows <= 1:
        return top_value
    return top_value - (row / (rows - 1)) * span


def compose(body: str, title: Optional[str], width: int, color: str) -> str:
    """Prepend the centered title line and color the whole block."""
    text = body
    if title:
        text = center(title, width) + "\n" + body
    return apply_color(text, color)


def index_column(index: int, count: int, area: PlotArea) -> int:
    """Column for the ``index``-th of ``count`` evenly spaced samples.

    A lone sample sits in the middle of the plot.
    """
    if count <= 1:
        return area.left + area.width // 2
    return area.left + math.floor((index / (count - 1)) * (area.width - 1))


def value_row(value: float, lo: float, hi: float, area: PlotArea) -> int:
    """Row for ``value``, higher values nearer the top; flat data sits mid-height."""
    fraction = 0.5 if hi == lo else normalize(value, lo, hi)
    return area.top + math.floor((1 - fraction) * (area.height - 1))


def plot_points(values: Sequence[float], area: PlotArea, grid_width: int) -> List[PlotPoint]:
    """Map each value (x = its index) to a grid cell inside ``area``."""
    lo, hi = min(values), max(values)
    points = []
    for i, value in enumerate(values):
        x = clamp(index_column(i, len(values), area), area.left, grid_width - 1)
        y = clamp(value_row(value, lo, hi, area), area.top, area.last_row)
        points.append(PlotPoint(grid_x=x, grid_y=y, original_x=i, original_y=value))
    return points
