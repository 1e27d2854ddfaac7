"""MCP tool: create_line_chart - Render values as an ASCII line chart."""

from typing import List, Optional

from mcp_server.services.chart_service import generate_chart
from mcp_server.tools.examples import describe_with_examples
from mcp_server.utils.context import ServerContext

TOOL_NAME = "create_line_chart"
TOOL_DESCRIPTION = describe_with_examples(
    "Create an ASCII line chart. Values are spaced evenly left to right, joined by "
    "line segments, with a numeric y-axis and optional x-axis labels.",
    TOOL_NAME,
)


async def handler(
    data: List[float],
    labels: Optional[List[str]] = None,
    title: Optional[str] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    color: Optional[str] = None,
    *,
    context: ServerContext,
) -> str:
    """Render a line chart.

    Args:
        data: Values to plot, in order.
        labels: Optional x-axis labels, one per value.
        title: Optional title centered above the chart.
        width: Chart width in characters (10-200, default 60).
        height: Chart height in rows (5-50, default 15).
        color: ANSI color name (default white).

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
    }
    envelope = await generate_chart(TOOL_NAME, params, context)
    return envelope.model_dump_json(exclude_none=True)
