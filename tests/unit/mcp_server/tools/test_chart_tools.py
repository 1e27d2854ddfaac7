"""Tests for the chart tool handlers."""

import json

import pytest

from mcp_server.tools import (
    create_bar_chart,
    create_histogram,
    create_line_chart,
    create_scatter_plot,
    create_sparkline,
)
from mcp_server.tools.examples import TOOL_EXAMPLES, describe_with_examples


@pytest.mark.asyncio
async def test_bar_chart_handler_returns_envelope(server_context):
    raw = await create_bar_chart.handler(
        data=[10, 20, 15, 25], labels=["A", "B", "C", "D"], context=server_context
    )
    payload = json.loads(raw)

    assert "error" not in payload
    assert payload["schema_version"] == "1.0"
    assert payload["result"].split("\n")[3].startswith("D █")
    assert payload["metadata"]["chart_type"] == "bar"
    assert payload["metadata"]["data_points"] == 4
    assert payload["metadata"]["dimensions"] == {"width": 60, "height": 15}


@pytest.mark.asyncio
async def test_line_chart_handler_flat_data(server_context):
    payload = json.loads(
        await create_line_chart.handler(data=[5, 5, 5, 5, 5], context=server_context)
    )
    assert payload["result"].count("●") == 5


@pytest.mark.asyncio
async def test_scatter_handler_options(server_context):
    payload = json.loads(
        await create_scatter_plot.handler(
            data=[1, 4, 2, 5], point_char="x", show_trend_line=True, context=server_context
        )
    )
    assert payload["result"].count("x") == 4


@pytest.mark.asyncio
async def test_histogram_handler_reports_bin_error(server_context):
    payload = json.loads(
        await create_histogram.handler(data=[1, 2, 3], bins=100, context=server_context)
    )

    assert "result" not in payload
    assert payload["error"]["category"] == "invalid_params"
    assert "Number of bins must be between 3 and 50" in payload["error"]["message"]


@pytest.mark.asyncio
async def test_sparkline_handler_declares_visible_width(server_context):
    payload = json.loads(
        await create_sparkline.handler(data=[0, 3.5, 7], context=server_context)
    )

    assert payload["result"] == "0.0 ▁▄█ 7.0"
    assert payload["metadata"]["dimensions"] == {"width": 11, "height": 1}


@pytest.mark.asyncio
async def test_invalid_color_is_reported(server_context):
    payload = json.loads(
        await create_line_chart.handler(data=[1, 2], color="purple", context=server_context)
    )

    assert payload["error"]["code"] == "VALIDATION_ERROR"
    assert payload["error"]["rpc_code"] == -32602
    assert "Invalid color. Available colors:" in payload["error"]["message"]


@pytest.mark.asyncio
async def test_tool_examples_render_without_errors(server_context):
    """Every published example payload must produce a chart."""
    handlers = {
        "create_line_chart": create_line_chart.handler,
        "create_bar_chart": create_bar_chart.handler,
        "create_scatter_plot": create_scatter_plot.handler,
        "create_histogram": create_histogram.handler,
        "create_sparkline": create_sparkline.handler,
    }
    for tool_name, examples in TOOL_EXAMPLES.items():
        for name, params in examples.items():
            payload = json.loads(await handlers[tool_name](**params, context=server_context))
            assert "error" not in payload, f"{tool_name}/{name}: {payload.get('error')}"
            assert payload["result"]


def test_describe_with_examples():
    text = describe_with_examples("Base.", "create_sparkline")
    assert text.startswith("Base.\n\nExamples:\n- ")
    assert describe_with_examples("Base.", "unknown") == "Base."
