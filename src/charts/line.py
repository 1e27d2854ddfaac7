"""Line chart renderer."""

from __future__ import annotations

import logging
from typing import List, Sequence

from charts import glyphs
from charts.frame import axis_value, compose, draw_value_axis, index_column, plot_points
from charts.geometry import PlotArea, draw_line, format_number, write_text
from charts.grid import Grid, Layer
from charts.models import ChartResult, Dataset, Dimensions
from charts.validation import EMPTY_DATA

logger = logging.getLogger(__name__)

PLOT_LEFT = 10
MAX_X_LABELS = 8
X_LABEL_CHARS = 6


def label_indices(count: int, limit: int = MAX_X_LABELS) -> List[int]:
    """Indices of at most ``limit`` labels spread evenly over ``count`` items."""
    if count <= limit:
        return list(range(count))
    step = (count - 1) / (limit - 1)
    return sorted({round(k * step) for k in range(limit)})


def _draw_x_labels(grid: Grid, labels: Sequence[str], area: PlotArea, row: int) -> None:
    for i in label_indices(len(labels)):
        text = labels[i][:X_LABEL_CHARS]
        col = min(index_column(i, len(labels), area), grid.width - len(text))
        write_text(grid, row, max(col, area.left), text, Layer.LABEL)


def render_line_chart(dataset: Dataset) -> ChartResult:
    """Render ``dataset`` as a line chart with a value axis on the left."""
    values = dataset.data
    if not values:
        raise ValueError(EMPTY_DATA)

    width, height = dataset.width, dataset.height
    area = PlotArea(left=PLOT_LEFT, width=max(0, width - PLOT_LEFT), height=max(1, height - 2))
    lo, hi = min(values), max(values)

    grid = Grid(width, height)
    draw_value_axis(
        grid,
        area,
        lambda row: format_number(axis_value(row, area.height, hi, hi - lo), 1),
        dot_every=2,
    )

    if dataset.labels and len(dataset.labels) == len(values):
        _draw_x_labels(grid, dataset.labels, area, height - 1)

    points = plot_points(values, area, width)
    for point in points:
        grid.set(point.grid_y, point.grid_x, glyphs.POINT, Layer.MARK)
    for current, nxt in zip(points, points[1:]):
        draw_line(grid, (current.grid_x, current.grid_y), (nxt.grid_x, nxt.grid_y), area)

    logger.debug("Rendered line chart: points=%d width=%d height=%d", len(points), width, height)
    return ChartResult(
        rendered_text=compose(grid.serialize(), dataset.title, width, dataset.color),
        dimensions=Dimensions(width=width, height=height),
        title=dataset.title,
    )
