"""Central registry for MCP tools.

This module provides a single point of registration for all chart tools.
It collects tool modules and registers them with the FastMCP server.
"""

import logging
from types import ModuleType
from typing import TYPE_CHECKING, List, Set

if TYPE_CHECKING:
    from fastmcp import FastMCP

    from mcp_server.utils.context import ServerContext

logger = logging.getLogger(__name__)

# Canonical tool names (without _tool suffix)
CANONICAL_TOOLS: Set[str] = {
    "create_line_chart",
    "create_bar_chart",
    "create_scatter_plot",
    "create_histogram",
    "create_sparkline",
}


def get_all_tool_names() -> List[str]:
    """Return list of all canonical tool names."""
    return sorted(CANONICAL_TOOLS)


def validate_tool_names() -> bool:
    """Validate that no canonical tool names end with '_tool'.

    Returns:
        True if all names are valid, raises ValueError otherwise.
    """
    invalid = [name for name in CANONICAL_TOOLS if name.endswith("_tool")]
    if invalid:
        raise ValueError(f"Tool names must not end with '_tool': {invalid}")
    return True


def tool_modules() -> List[ModuleType]:
    from mcp_server.tools import (
        create_bar_chart,
        create_histogram,
        create_line_chart,
        create_scatter_plot,
        create_sparkline,
    )

    return [
        create_line_chart,
        create_bar_chart,
        create_scatter_plot,
        create_histogram,
        create_sparkline,
    ]


def register_all(mcp: "FastMCP", context: "ServerContext") -> None:
    """Register all chart tools with the MCP server.

    Args:
        mcp: FastMCP server instance
        context: Server state bound into every handler.
    """
    validate_tool_names()

    from mcp_server.utils.context import bind_server_context
    from mcp_server.utils.tracing import trace_tool

    registered = set()
    for module in tool_modules():
        name = module.TOOL_NAME
        if name not in CANONICAL_TOOLS:
            raise ValueError(f"Tool '{name}' is not in CANONICAL_TOOLS")
        traced = trace_tool(name)(module.handler)
        mcp.tool(name=name, description=module.TOOL_DESCRIPTION)(
            bind_server_context(traced, context)
        )
        registered.add(name)

    missing = CANONICAL_TOOLS - registered
    if missing:
        raise ValueError(f"Canonical tools without a module: {sorted(missing)}")

    logger.info("Registered %d tools with MCP server", len(registered))
