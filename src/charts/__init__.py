"""Text-grid chart rendering engine."""

from charts.bar import render_bar_chart
from charts.histogram import render_histogram
from charts.line import render_line_chart
from charts.models import (
    BarChartOptions,
    ChartResult,
    Dataset,
    Dimensions,
    HistogramOptions,
    ScatterPlotOptions,
    SparklineOptions,
)
from charts.scatter import render_scatter_plot
from charts.sparkline import render_multi_sparkline, render_sparkline, render_trend_sparkline
from charts.validation import ValidationError, validate_chart_data

__all__ = [
    "BarChartOptions",
    "ChartResult",
    "Dataset",
    "Dimensions",
    "HistogramOptions",
    "ScatterPlotOptions",
    "SparklineOptions",
    "ValidationError",
    "render_bar_chart",
    "render_histogram",
    "render_line_chart",
    "render_multi_sparkline",
    "render_scatter_plot",
    "render_sparkline",
    "render_trend_sparkline",
    "validate_chart_data",
]
