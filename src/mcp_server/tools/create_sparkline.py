"""MCP tool: create_sparkline - Compact single-line trend."""

from typing import List, Optional

from mcp_server.services.chart_service import generate_chart
from mcp_server.tools.examples import describe_with_examples
from mcp_server.utils.context import ServerContext

TOOL_NAME = "create_sparkline"
TOOL_DESCRIPTION = describe_with_examples(
    "Create a one-line sparkline from block glyphs, optionally framed by the "
    "minimum and maximum values.",
    TOOL_NAME,
)


async def handler(
    data: List[float],
    labels: Optional[List[str]] = None,
    title: Optional[str] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    color: Optional[str] = None,
    show_min_max: Optional[bool] = None,
    fill_char: Optional[str] = None,
    *,
    context: ServerContext,
) -> str:
    """Render a sparkline.

    Args:
        data: Values, one glyph each.
        labels: Optional labels, one per value (validated, not drawn).
        title: Optional title line.
        width: Maximum line width in characters (10-200, default 60).
        height: Accepted for a uniform interface (5-50); a sparkline is one row.
        color: ANSI color name (default white).
        show_min_max: Frame the line with min and max values (default true).
        fill_char: Repeat this character instead of graduated blocks.

    Returns:
        JSON response envelope whose result is the rendered sparkline.
    """
    params = {
        "data": data,
        "labels": labels,
        "title": title,
        "width": width,
        "height": height,
        "color": color,
        "show_min_max": show_min_max,
        "fill_char": fill_char,
    }
    envelope = await generate_chart(TOOL_NAME, params, context)
    return envelope.model_dump_json(exclude_none=True)
