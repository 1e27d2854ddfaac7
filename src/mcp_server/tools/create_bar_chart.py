"""MCP tool: create_bar_chart - Render values as horizontal or vertical bars."""

from typing import List, Optional

from mcp_server.services.chart_service import generate_chart
from mcp_server.tools.examples import describe_with_examples
from mcp_server.utils.context import ServerContext

TOOL_NAME = "create_bar_chart"
TOOL_DESCRIPTION = describe_with_examples(
    "Create an ASCII bar chart, horizontal (default) or vertical, with optional "
    "labels and value annotations.",
    TOOL_NAME,
)


async def handler(
    data: List[float],
    labels: Optional[List[str]] = None,
    title: Optional[str] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    color: Optional[str] = None,
    orientation: Optional[str] = None,
    show_values: Optional[bool] = None,
    *,
    context: ServerContext,
) -> str:
    """Render a bar chart.

    Args:
        data: Bar values.
        labels: Optional bar labels, one per value.
        title: Optional chart title.
        width: Chart width in characters (10-200, default 60).
        height: Chart height in rows (5-50, default 15).
        color: ANSI color name (default white).
        orientation: 'horizontal' (default) or 'vertical'.
        show_values: Print each bar's value (default true).

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
        "orientation": orientation,
        "show_values": show_values,
    }
    envelope = await generate_chart(TOOL_NAME, params, context)
    return envelope.model_dump_json(exclude_none=True)
