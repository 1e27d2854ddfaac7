"""Horizontal and vertical bar chart renderers."""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from charts import glyphs
from charts.frame import compose
from charts.geometry import format_number, normalize, pad_right, write_text
from charts.grid import Grid, Layer
from charts.models import BarChartOptions, ChartResult, Dataset, Dimensions
from charts.validation import EMPTY_DATA, INVALID_ORIENTATION

logger = logging.getLogger(__name__)

MAX_LABEL_WIDTH = 15
VALUE_COLUMNS = 15


def bar_fraction(value: float, lo: float, hi: float) -> float:
    """Share of the full bar length for ``value``; flat ranges render at half."""
    if hi == lo:
        return 0.5
    return normalize(value, lo, hi)


def partial_block(remainder: float) -> str:
    if remainder > 0.75:
        return glyphs.DARK_SHADE
    if remainder > 0.5:
        return glyphs.MEDIUM_SHADE
    if remainder > 0.25:
        return glyphs.LIGHT_SHADE
    return ""


def _value_range(values: Sequence[float]):
    # Zero stays inside the range so bars grow from a true baseline.
    return min(min(values), 0.0), max(values)


def _label_width(labels: Optional[Sequence[str]], count: int) -> int:
    if labels:
        return min(max(len(label) for label in labels), MAX_LABEL_WIDTH)
    return len(f"Item {count}")


def _render_horizontal(dataset: Dataset, show_values: bool) -> str:
    values = dataset.data
    labels = dataset.labels
    lo, hi = _value_range(values)

    label_width = _label_width(labels, len(values))
    bar_area = max(0, dataset.width - label_width - VALUE_COLUMNS)
    max_bars = min(len(values), dataset.height - (1 if dataset.title else 0))

    lines = []
    for i, value in enumerate(values[:max_bars]):
        label = (labels[i] if labels and labels[i] else f"Item {i + 1}")[:label_width]

        length = bar_fraction(value, lo, hi) * bar_area
        full = math.floor(length)
        line = pad_right(label, label_width) + " " + glyphs.FULL_BLOCK * full
        line += partial_block(length - full)
        if show_values:
            line += f" {format_number(value, 1)}"
        lines.append(line)

    return "\n".join(lines)


def _render_vertical(dataset: Dataset, show_values: bool) -> str:
    values = dataset.data
    labels = dataset.labels
    width = dataset.width
    lo, hi = _value_range(values)

    grid_height = dataset.height - (1 if dataset.title else 0)
    axis_row = grid_height - 2
    label_row = grid_height - 1
    bar_bottom = axis_row - 1
    # One spare row above the tallest bar keeps room for its value label.
    chart_height = max(1, grid_height - 3)

    count = len(values)
    bar_width = max(1, (width - 2) // count)
    total_width = min(count * bar_width, width - 2)

    grid = Grid(width, grid_height)
    for i, value in enumerate(values):
        start = 1 + (i * total_width) // count
        bar_height = math.floor(bar_fraction(value, lo, hi) * chart_height)

        for level in range(bar_height):
            row = bar_bottom - level
            for offset in range(bar_width):
                if start + offset < width - 1:
                    grid.set(row, start + offset, glyphs.FULL_BLOCK, Layer.MARK)

        if show_values:
            top = bar_bottom - bar_height
            if top >= 0:
                write_text(grid, top, start, format_number(value, 1), Layer.LABEL)

    for col in range(width):
        grid.set(axis_row, col, glyphs.HORIZONTAL, Layer.AXIS)

    if labels:
        for i, label in enumerate(labels[:count]):
            start = 1 + (i * total_width) // count
            write_text(grid, label_row, start, label[:bar_width], Layer.LABEL)

    return grid.serialize()


def render_bar_chart(dataset: Dataset, options: Optional[BarChartOptions] = None) -> ChartResult:
    """Render ``dataset`` as horizontal (default) or vertical bars."""
    options = options or BarChartOptions()
    if not dataset.data:
        raise ValueError(EMPTY_DATA)

    if options.orientation == "horizontal":
        body = _render_horizontal(dataset, options.show_values)
    elif options.orientation == "vertical":
        body = _render_vertical(dataset, options.show_values)
    else:
        raise ValueError(INVALID_ORIENTATION)

    logger.debug(
        "Rendered bar chart: bars=%d orientation=%s", len(dataset.data), options.orientation
    )
    return ChartResult(
        rendered_text=compose(body, dataset.title, dataset.width, dataset.color),
        dimensions=Dimensions(width=dataset.width, height=dataset.height),
        title=dataset.title,
    )
