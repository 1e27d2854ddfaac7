"""Health reporting and startup self-test for the MCP server."""

from __future__ import annotations

import logging
from typing import Any, Dict, Tuple

from mcp_server.utils.context import ServerContext

logger = logging.getLogger(__name__)

SELF_TEST_TOOLS = (
    "create_line_chart",
    "create_bar_chart",
    "create_scatter_plot",
    "create_histogram",
    "create_sparkline",
)
SELF_TEST_PARAMS = {"data": [1, 3, 2, 5, 4], "width": 30, "height": 8}


def health_payload(context: ServerContext) -> Tuple[Dict[str, Any], int]:
    """Readiness plus monitor status, with 200 when ready and 503 otherwise."""
    payload = context.init_state.as_dict()
    payload["monitor"] = context.monitor.health_status()
    return payload, 200 if context.init_state.is_ready else 503


def run_renderer_self_test() -> None:
    """Render a tiny chart with every chart tool.

    Raises:
        RuntimeError: if any renderer fails or returns empty output.
    """
    from mcp_server.services.chart_service import generate_chart_sync

    for tool_name in SELF_TEST_TOOLS:
        try:
            result = generate_chart_sync(tool_name, SELF_TEST_PARAMS)
        except Exception as exc:
            raise RuntimeError(f"Renderer self-test failed for {tool_name}: {exc}") from exc
        if not result.rendered_text:
            raise RuntimeError(f"Renderer self-test produced no output for {tool_name}")
    logger.info("Renderer self-test passed for %d tools", len(SELF_TEST_TOOLS))
