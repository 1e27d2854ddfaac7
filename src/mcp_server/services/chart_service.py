"""Chart generation service: dispatch, time budgets, progress and envelopes."""

import logging
import time
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from charts.bar import render_bar_chart
from charts.histogram import render_histogram
from charts.line import render_line_chart
from charts.models import (
    DEFAULT_BINS,
    BarChartOptions,
    ChartResult,
    Dataset,
    HistogramOptions,
    ScatterPlotOptions,
    SparklineOptions,
)
from charts.scatter import render_scatter_plot
from charts.sparkline import render_sparkline
from charts.validation import (
    validate_bins,
    validate_chart_data,
    validate_flag,
    validate_orientation,
    validate_single_char,
)
from common.models.tool_envelopes import ChartDimensions, ChartResponseEnvelope, ChartToolMetadata
from common.observability.context import request_id_var
from mcp_server.utils.context import ServerContext
from mcp_server.utils.errors import (
    UnknownChartToolError,
    classify_exception,
    envelope_for_exception,
)
from mcp_server.utils.progress import CHART_STEPS, create_chart_progress_reporter
from mcp_server.utils.timeout import with_timeout

logger = logging.getLogger(__name__)

__all__ = [
    "CHARTS",
    "UnknownChartToolError",
    "generate_chart",
    "generate_chart_sync",
    "prepare_request",
    "render",
]


@dataclass(frozen=True)
class ChartDefinition:
    """How one tool turns raw parameters into options and a rendered chart."""

    chart_type: str
    parse_options: Callable[[Mapping[str, Any]], Any]
    render: Callable[[Dataset, Any], ChartResult]


def _no_options(params: Mapping[str, Any]) -> None:
    return None


def _bar_options(params: Mapping[str, Any]) -> BarChartOptions:
    return BarChartOptions(
        orientation=validate_orientation(params.get("orientation")),
        show_values=validate_flag(params.get("show_values"), "show_values", True),
    )


def _histogram_options(params: Mapping[str, Any]) -> HistogramOptions:
    return HistogramOptions(
        bins=validate_bins(params.get("bins"), DEFAULT_BINS),
        show_frequency=validate_flag(params.get("show_frequency"), "show_frequency", True),
    )


def _scatter_options(params: Mapping[str, Any]) -> ScatterPlotOptions:
    point_char = validate_single_char(params.get("point_char"), "point_char")
    show_trend_line = validate_flag(params.get("show_trend_line"), "show_trend_line", False)
    if point_char is None:
        return ScatterPlotOptions(show_trend_line=show_trend_line)
    return ScatterPlotOptions(point_char=point_char, show_trend_line=show_trend_line)


def _sparkline_options(params: Mapping[str, Any]) -> SparklineOptions:
    return SparklineOptions(
        show_min_max=validate_flag(params.get("show_min_max"), "show_min_max", True),
        fill_char=validate_single_char(params.get("fill_char"), "fill_char"),
    )


CHARTS: Dict[str, ChartDefinition] = {
    "create_line_chart": ChartDefinition(
        "line", _no_options, lambda dataset, _: render_line_chart(dataset)
    ),
    "create_bar_chart": ChartDefinition("bar", _bar_options, render_bar_chart),
    "create_scatter_plot": ChartDefinition("scatter", _scatter_options, render_scatter_plot),
    "create_histogram": ChartDefinition("histogram", _histogram_options, render_histogram),
    "create_sparkline": ChartDefinition("sparkline", _sparkline_options, render_sparkline),
}


def _definition(tool_name: str) -> ChartDefinition:
    definition = CHARTS.get(tool_name)
    if definition is None:
        raise UnknownChartToolError(tool_name)
    return definition


def prepare_request(tool_name: str, params: Mapping[str, Any]) -> Tuple[Dataset, Any]:
    """Validate raw parameters into a dataset and renderer options.

    Raises:
        UnknownChartToolError: ``tool_name`` is not a chart tool.
        ValidationError: the parameters break the input contract.
    """
    definition = _definition(tool_name)
    dataset = validate_chart_data(params)
    return dataset, definition.parse_options(params)


def render(tool_name: str, dataset: Dataset, options: Any) -> ChartResult:
    return _definition(tool_name).render(dataset, options)


def _size_hint(params: Mapping[str, Any]) -> int:
    data = params.get("data")
    return len(data) if isinstance(data, (list, tuple)) else 0


async def generate_chart(
    tool_name: str, params: Mapping[str, Any], context: ServerContext
) -> ChartResponseEnvelope:
    """Validate, render and wrap one chart request.

    Never raises for chart failures: validation errors, unknown tools,
    timeouts and unexpected exceptions all come back as error envelopes after
    being logged and recorded on the monitor.
    """
    started_at = time.monotonic()
    request_id = request_id_var.get() or uuid.uuid4().hex
    metadata = ChartToolMetadata(request_id=request_id, data_points=_size_hint(params))

    definition = CHARTS.get(tool_name)
    chart_type = definition.chart_type if definition else tool_name
    metadata.chart_type = definition.chart_type if definition else None
    progress = create_chart_progress_reporter(chart_type, _size_hint(params))

    try:
        progress.next_step(CHART_STEPS[0])
        dataset, options = await with_timeout(
            prepare_request,
            tool_name,
            params,
            timeout_ms=context.timeouts.validation_ms,
            operation=f"{tool_name}_validation",
        )

        for step in CHART_STEPS[1:4]:
            progress.next_step(step)
        result = await with_timeout(
            render,
            tool_name,
            dataset,
            options,
            timeout_ms=context.timeouts.generation_ms,
            operation=f"{tool_name}_generation",
        )
        for step in CHART_STEPS[4:]:
            progress.next_step(step)
        progress.complete(f"{chart_type} chart generated")
    except Exception as exc:
        progress.fail(exc)
        context.monitor.record_error(exc, f"tool_{tool_name}")
        metadata.execution_time_ms = (time.monotonic() - started_at) * 1000
        logger.warning(
            "event=chart_generation_failed tool=%s request_id=%s category=%s error=%s",
            tool_name,
            request_id,
            classify_exception(exc).value,
            exc,
        )
        return envelope_for_exception(exc, metadata)

    metadata.title = result.title
    metadata.dimensions = ChartDimensions(
        width=result.dimensions.width, height=result.dimensions.height
    )
    metadata.execution_time_ms = (time.monotonic() - started_at) * 1000
    return ChartResponseEnvelope(result=result.rendered_text, metadata=metadata)


def generate_chart_sync(tool_name: str, params: Optional[Mapping[str, Any]] = None) -> ChartResult:
    """Validate and render in the calling thread, raising on failure."""
    dataset, options = prepare_request(tool_name, params or {})
    return render(tool_name, dataset, options)
