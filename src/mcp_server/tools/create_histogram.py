"""MCP tool: create_histogram - Bin values and draw their distribution."""

from typing import List, Optional

from mcp_server.services.chart_service import generate_chart
from mcp_server.tools.examples import describe_with_examples
from mcp_server.utils.context import ServerContext

TOOL_NAME = "create_histogram"
TOOL_DESCRIPTION = describe_with_examples(
    "Create an ASCII histogram: values are grouped into equal-width bins and a "
    "summary line (count, mean, median) is printed below.",
    TOOL_NAME,
)


async def handler(
    data: List[float],
    labels: Optional[List[str]] = None,
    title: Optional[str] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    color: Optional[str] = None,
    bins: Optional[int] = None,
    show_frequency: Optional[bool] = None,
    *,
    context: ServerContext,
) -> str:
    """Render a histogram.

    Args:
        data: Sample values.
        labels: Optional labels, one per value (validated, not drawn).
        title: Optional chart title.
        width: Chart width in characters (10-200, default 60).
        height: Chart height in rows (5-50, default 15).
        color: ANSI color name (default white).
        bins: Number of bins (3-50, default 10).
        show_frequency: Label the axis in percent instead of counts (default true).

    Returns:
        JSON response envelope whose result is the rendered chart.
    """
    params = {
        "data": data,
        "labels": labels,
        "title": title,
        "width": width,
        "height": height,
        "color": color,
        "bins": bins,
        "show_frequency": show_frequency,
    }
    envelope = await generate_chart(TOOL_NAME, params, context)
    return envelope.model_dump_json(exclude_none=True)
