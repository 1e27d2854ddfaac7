"""Single-line sparkline renderers."""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from charts import glyphs
from charts.colors import apply_color
from charts.frame import compose
from charts.geometry import format_number, normalize, pad_right
from charts.models import ChartResult, Dataset, Dimensions, SparklineOptions
from charts.validation import EMPTY_DATA

logger = logging.getLogger(__name__)

MIN_MAX_COLUMNS = 20
SERIES_LABEL_WIDTH = 15
UP_THRESHOLD = 1.05
DOWN_THRESHOLD = 0.95


def spark_glyph(value: float, lo: float, hi: float) -> str:
    fraction = 0.5 if hi == lo else normalize(value, lo, hi)
    return glyphs.SPARK_BLOCKS[math.floor(fraction * (len(glyphs.SPARK_BLOCKS) - 1))]


def sparkline_text(dataset: Dataset, options: Optional[SparklineOptions] = None) -> str:
    """The uncolored sparkline row for ``dataset``, min/max framing included."""
    options = options or SparklineOptions()
    values = dataset.data
    if not values:
        raise ValueError(EMPTY_DATA)

    lo, hi = min(values), max(values)
    limit = dataset.width
    if options.show_min_max:
        limit = max(1, dataset.width - MIN_MAX_COLUMNS)
    shown = values[:limit]

    if options.fill_char:
        spark = options.fill_char * len(shown)
    else:
        spark = "".join(spark_glyph(v, lo, hi) for v in shown)

    if options.show_min_max:
        spark = f"{format_number(lo, 1)} {spark} {format_number(hi, 1)}"
    return spark


def render_sparkline(dataset: Dataset, options: Optional[SparklineOptions] = None) -> ChartResult:
    """Render ``dataset`` as one row of graduated block glyphs.

    The declared width is the visible length of the sparkline row, not the
    requested width.
    """
    line = sparkline_text(dataset, options)
    logger.debug("Rendered sparkline: values=%d visible_width=%d", len(dataset.data), len(line))
    return ChartResult(
        rendered_text=compose(line, dataset.title, len(line), dataset.color),
        dimensions=Dimensions(width=len(line), height=2 if dataset.title else 1),
        title=dataset.title,
    )


def render_multi_sparkline(
    datasets: Sequence[Dataset], options: Optional[SparklineOptions] = None
) -> ChartResult:
    """Stack one labelled sparkline per dataset.

    Each row is labelled with the dataset title (or ``Series N``) padded or
    truncated to a fixed column, and colored with its own dataset's color.
    """
    if not datasets:
        raise ValueError("At least one dataset is required")

    rows = []
    widest = 0
    for i, dataset in enumerate(datasets):
        label = (dataset.title or f"Series {i + 1}")[:SERIES_LABEL_WIDTH]
        line = sparkline_text(dataset, options)
        widest = max(widest, len(line))
        rows.append(pad_right(label, SERIES_LABEL_WIDTH) + " " + apply_color(line, dataset.color))

    return ChartResult(
        rendered_text="\n".join(rows),
        dimensions=Dimensions(width=widest + SERIES_LABEL_WIDTH + 1, height=len(rows)),
    )


def trend_glyph(previous: float, current: float) -> str:
    if current > previous * UP_THRESHOLD:
        return glyphs.TREND_UP
    if current < previous * DOWN_THRESHOLD:
        return glyphs.TREND_DOWN
    return glyphs.TREND_FLAT


def overall_glyph(first: float, last: float) -> str:
    if last > first:
        return glyphs.OVERALL_UP
    if last < first:
        return glyphs.OVERALL_DOWN
    return glyphs.OVERALL_FLAT


def render_trend_sparkline(dataset: Dataset) -> ChartResult:
    """One arrow per consecutive pair (5% dead band) plus an overall marker."""
    values = dataset.data
    if len(values) < 2:
        raise ValueError("At least 2 values required for trend sparkline")

    arrows = "".join(trend_glyph(prev, cur) for prev, cur in zip(values, values[1:]))
    line = f"{arrows} {overall_glyph(values[0], values[-1])}"
    return ChartResult(
        rendered_text=compose(line, dataset.title, len(line), dataset.color),
        dimensions=Dimensions(width=len(line), height=2 if dataset.title else 1),
        title=dataset.title,
    )
