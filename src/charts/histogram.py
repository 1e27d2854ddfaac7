"""Histogram renderer with a summary statistics footer."""

from __future__ import annotations

import logging
import math
from typing import Optional

from charts import glyphs
from charts.frame import axis_value, compose, draw_value_axis
from charts.geometry import PlotArea, center, format_number, write_text
from charts.grid import Grid, Layer
from charts.models import ChartResult, Dataset, Dimensions, HistogramOptions
from charts.stats import histogram_bins, mean, median
from charts.validation import EMPTY_DATA

logger = logging.getLogger(__name__)

PLOT_LEFT = 12
MAX_RANGE_LABELS = 6


def _round_half_up(value: float) -> str:
    return str(math.floor(value + 0.5))


def _count_label(value: float, total: int, show_frequency: bool) -> str:
    if show_frequency:
        return format_number(value / total * 100, 1) + "%"
    return _round_half_up(value)


def summary_line(values) -> str:
    return (
        f"n={len(values)}, μ={format_number(mean(values), 2)}, "
        f"median={format_number(median(values), 2)}"
    )


def render_histogram(dataset: Dataset, options: Optional[HistogramOptions] = None) -> ChartResult:
    """Bin ``dataset`` into equal-width ranges and draw one bar per bin.

    The declared height is one more than requested to account for the
    statistics line below the chart.
    """
    options = options or HistogramOptions()
    values = dataset.data
    if not values:
        raise ValueError(EMPTY_DATA)

    bins = histogram_bins(values, options.bins)
    max_count = max(b.count for b in bins)
    total = len(values)

    width, height = dataset.width, dataset.height
    area = PlotArea(left=PLOT_LEFT, width=max(0, width - PLOT_LEFT), height=max(1, height - 3))

    grid = Grid(width, height)
    draw_value_axis(
        grid,
        area,
        lambda row: _count_label(
            axis_value(row, area.height, max_count, max_count), total, options.show_frequency
        ),
        dot_every=2,
    )

    bar_width = max(1, area.width // len(bins))
    for i, b in enumerate(bins):
        start = PLOT_LEFT + (i * area.width) // len(bins)
        fraction = b.count / max_count if max_count else 0.0
        bar_height = math.floor(fraction * area.height)

        for level in range(bar_height):
            row = area.last_row - level
            for offset in range(bar_width):
                grid.set(row, start + offset, glyphs.FULL_BLOCK, Layer.MARK)

        if bar_height < area.height - 1:
            if options.show_frequency:
                annotation = _round_half_up(b.frequency * 100)
            else:
                annotation = str(b.count)
            write_text(grid, area.last_row - bar_height, start, annotation, Layer.LABEL)

    # Only the first few range labels fit without crowding.
    for i, b in enumerate(bins[:MAX_RANGE_LABELS]):
        start = PLOT_LEFT + (i * area.width) // len(bins)
        write_text(grid, height - 1, start, b.label()[: bar_width + 2], Layer.LABEL)

    body = grid.serialize() + "\n" + center(summary_line(values), width)
    logger.debug("Rendered histogram: bins=%d values=%d", len(bins), total)
    return ChartResult(
        rendered_text=compose(body, dataset.title, width, dataset.color),
        dimensions=Dimensions(width=width, height=height + 1),
        title=dataset.title,
    )
