"""MCP tool: create_scatter_plot - Plot values against their index."""

from typing import List, Optional

from mcp_server.services.chart_service import generate_chart
from mcp_server.tools.examples import describe_with_examples
from mcp_server.utils.context import ServerContext

TOOL_NAME = "create_scatter_plot"
TOOL_DESCRIPTION = describe_with_examples(
    "Create an ASCII scatter plot of values against their index, optionally with a "
    "least-squares trend line.",
    TOOL_NAME,
)


async def handler(
    data: List[float],
    labels: Optional[List[str]] = None,
    title: Optional[str] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    color: Optional[str] = None,
    point_char: Optional[str] = None,
    show_trend_line: Optional[bool] = None,
    *,
    context: ServerContext,
) -> str:
    """Render a scatter plot.

    Args:
        data: Y values; x is each value's index.
        labels: Optional labels, one per value (validated, not drawn).
        title: Optional chart title.
        width: Chart width in characters (10-200, default 60).
        height: Chart height in rows (5-50, default 15).
        color: ANSI color name (default white).
        point_char: Single character used for points (default '●').
        show_trend_line: Overlay a linear regression line (default false).

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
        "point_char": point_char,
        "show_trend_line": show_trend_line,
    }
    envelope = await generate_chart(TOOL_NAME, params, context)
    return envelope.model_dump_json(exclude_none=True)
