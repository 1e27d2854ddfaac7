"""Tests for the scoped in-memory span exporter registry."""

from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor

from common.observability.in_memory_exporter import (
    clear_span_exporter,
    get_finished_spans,
    get_or_create_span_exporter,
)


def test_exporter_is_shared_per_scope():
    assert get_or_create_span_exporter("mcp") is get_or_create_span_exporter(" MCP ")
    assert get_or_create_span_exporter("") is get_or_create_span_exporter("mcp")
    assert get_or_create_span_exporter("other") is not get_or_create_span_exporter("mcp")


def test_finished_spans_and_clear():
    exporter = get_or_create_span_exporter("exporter-test")
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))

    with provider.get_tracer("test").start_as_current_span("span-a"):
        pass

    assert [s.name for s in get_finished_spans("exporter-test")] == ["span-a"]
    clear_span_exporter("exporter-test")
    assert list(get_finished_spans("exporter-test")) == []
