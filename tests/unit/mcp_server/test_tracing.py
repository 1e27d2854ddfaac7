"""Tests for MCP tool tracing and request bookkeeping."""

import json
from unittest.mock import patch

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import SpanKind, StatusCode

from common.observability.context import request_id_var
from mcp_server.utils.tracing import _extract_envelope_error_category, trace_tool


def _in_memory_tracer():
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    return provider.get_tracer("mcp.server"), exporter


@pytest.mark.asyncio
async def test_trace_tool_records_success_span(server_context):
    tracer, exporter = _in_memory_tracer()
    seen = {}

    async def handler(data, *, context):
        seen["request_id"] = request_id_var.get()
        seen["active"] = context.monitor.active_requests
        return json.dumps({"result": "chart"})

    with patch("opentelemetry.trace.get_tracer", return_value=tracer):
        traced = trace_tool("create_line_chart")(handler)
        await traced(data=[1, 2, 3], context=server_context)

    spans = exporter.get_finished_spans()
    assert len(spans) == 1
    span = spans[0]
    assert span.name == "mcp.tool.create_line_chart"
    assert span.kind == SpanKind.SERVER
    assert span.status.status_code == StatusCode.OK
    assert span.attributes["mcp.tool.name"] == "create_line_chart"
    assert span.attributes["mcp.tool.version"] == "v1"
    assert span.attributes["mcp.tool.data_points"] == 3
    assert span.attributes["mcp.request_id"] == seen["request_id"]

    assert seen["active"] == 1
    assert server_context.monitor.active_requests == 0
    assert request_id_var.get() is None


@pytest.mark.asyncio
async def test_trace_tool_keeps_incoming_request_id(server_context):
    tracer, exporter = _in_memory_tracer()

    async def handler(*, context):
        return "{}"

    token = request_id_var.set("from-header")
    try:
        with patch("opentelemetry.trace.get_tracer", return_value=tracer):
            await trace_tool("create_sparkline")(handler)(context=server_context)
    finally:
        request_id_var.reset(token)

    assert exporter.get_finished_spans()[0].attributes["mcp.request_id"] == "from-header"


@pytest.mark.asyncio
async def test_trace_tool_marks_error_for_error_envelope(server_context):
    """Envelope responses with non-null error should mark span status as ERROR."""
    tracer, exporter = _in_memory_tracer()

    async def handler(*, context):
        return json.dumps(
            {"result": None, "error": {"category": "invalid_params", "message": "bad"}}
        )

    with (
        patch("opentelemetry.trace.get_tracer", return_value=tracer),
        patch("mcp_server.utils.tracing.record_tool_call") as mock_record,
    ):
        await trace_tool("create_bar_chart")(handler)(context=server_context)

    span = exporter.get_finished_spans()[0]
    assert span.status.status_code == StatusCode.ERROR
    assert span.attributes["mcp.tool.error.category"] == "invalid_params"
    assert mock_record.call_args.kwargs["outcome"] == "error"
    assert mock_record.call_args.kwargs["error_category"] == "invalid_params"


@pytest.mark.asyncio
async def test_trace_tool_records_raised_exceptions(server_context):
    tracer, exporter = _in_memory_tracer()

    async def handler(*, context):
        raise RuntimeError("boom")

    with patch("opentelemetry.trace.get_tracer", return_value=tracer):
        traced = trace_tool("create_histogram")(handler)
        with pytest.raises(RuntimeError):
            await traced(context=server_context)

    span = exporter.get_finished_spans()[0]
    assert span.status.status_code == StatusCode.ERROR
    assert span.attributes["mcp.tool.error.category"] == "internal"
    assert server_context.monitor.active_requests == 0
    patterns = server_context.monitor.error_patterns()
    assert patterns[0].contexts == ["tool_create_histogram"]


def test_extract_envelope_error_category():
    assert _extract_envelope_error_category('{"error": {"category": "timeout"}}') == "timeout"
    assert _extract_envelope_error_category('{"error": null}') is None
    assert _extract_envelope_error_category('{"error": "oops"}') == "unknown"
    assert _extract_envelope_error_category("not json") is None
    assert _extract_envelope_error_category({"error": {}}) == "unknown"
