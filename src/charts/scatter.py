"""Scatter plot renderer with an optional least-squares trend line."""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from charts.frame import axis_value, compose, draw_value_axis, index_column, plot_points, value_row
from charts.geometry import PlotArea, clamp, draw_line, format_number, write_text
from charts.grid import Grid, Layer
from charts.models import (
    ChartResult,
    Dataset,
    Dimensions,
    LinearRegression,
    PlotPoint,
    ScatterPlotOptions,
)
from charts.stats import linear_regression
from charts.validation import EMPTY_DATA

logger = logging.getLogger(__name__)

PLOT_LEFT = 10
MAX_X_TICKS = 8


def tick_indices(count: int, limit: int = MAX_X_TICKS) -> List[int]:
    """Every ``ceil(count / limit)``-th index, so at most ``limit`` ticks."""
    step = max(1, math.ceil(count / limit))
    return list(range(0, count, step))


def _draw_trend_line(
    grid: Grid,
    points: List[PlotPoint],
    regression: LinearRegression,
    lo: float,
    hi: float,
    area: PlotArea,
) -> int:
    first, last = points[0], points[-1]

    def row_for(x: float) -> int:
        return clamp(value_row(regression.predict(x), lo, hi, area), area.top, area.last_row)

    start_row = row_for(first.original_x)
    end_row = row_for(last.original_x)
    return draw_line(grid, (first.grid_x, start_row), (last.grid_x, end_row), area)


def render_scatter_plot(
    dataset: Dataset, options: Optional[ScatterPlotOptions] = None
) -> ChartResult:
    """Plot each value against its index.

    With ``show_trend_line`` and at least two values, an ordinary least
    squares fit is drawn across the plot underneath the points.
    """
    options = options or ScatterPlotOptions()
    values = dataset.data
    if not values:
        raise ValueError(EMPTY_DATA)

    width, height = dataset.width, dataset.height
    area = PlotArea(left=PLOT_LEFT, width=max(0, width - PLOT_LEFT), height=max(1, height - 3))
    lo, hi = min(values), max(values)
    span = (hi - lo) or 1

    grid = Grid(width, height)
    draw_value_axis(
        grid,
        area,
        lambda row: format_number(axis_value(row, area.height, hi, span), 1),
        dot_every=3,
    )

    count = len(values)
    for i in tick_indices(count):
        text = str(i)
        col = min(index_column(i, count, area), width - len(text))
        write_text(grid, height - 1, max(col, area.left), text, Layer.LABEL)

    points = plot_points(values, area, width)
    for point in points:
        grid.set(point.grid_y, point.grid_x, options.point_char, Layer.MARK)

    if options.show_trend_line and count > 1:
        regression = linear_regression([float(i) for i in range(count)], values)
        written = _draw_trend_line(grid, points, regression, lo, hi, area)
        logger.debug(
            "Trend line: slope=%.4f intercept=%.4f r_squared=%.4f cells=%d",
            regression.slope,
            regression.intercept,
            regression.r_squared,
            written,
        )

    logger.debug("Rendered scatter plot: points=%d width=%d height=%d", count, width, height)
    return ChartResult(
        rendered_text=compose(grid.serialize(), dataset.title, width, dataset.color),
        dimensions=Dimensions(width=width, height=height),
        title=dataset.title,
    )
