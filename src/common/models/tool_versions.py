"""Central tool response contract version registry."""

from __future__ import annotations

DEFAULT_TOOL_VERSION = "v1"

# Keep this list aligned with mcp_server.tools.registry.CANONICAL_TOOLS.
TOOL_VERSION_REGISTRY: dict[str, str] = {
    "create_bar_chart": DEFAULT_TOOL_VERSION,
    "create_histogram": DEFAULT_TOOL_VERSION,
    "create_line_chart": DEFAULT_TOOL_VERSION,
    "create_scatter_plot": DEFAULT_TOOL_VERSION,
    "create_sparkline": DEFAULT_TOOL_VERSION,
}


def get_tool_version(tool_name: str | None) -> str:
    """Resolve the configured contract version for a tool."""
    if not isinstance(tool_name, str):
        return DEFAULT_TOOL_VERSION
    normalized = tool_name.strip()
    if not normalized:
        return DEFAULT_TOOL_VERSION
    return TOOL_VERSION_REGISTRY.get(normalized, DEFAULT_TOOL_VERSION)
