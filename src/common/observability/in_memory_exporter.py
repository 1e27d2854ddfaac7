"""In-memory OTEL span exporter registry for deterministic tests."""

from __future__ import annotations

import threading
from collections.abc import Sequence

from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

DEFAULT_SCOPE = "mcp"

_lock = threading.Lock()
_span_exporters: dict[str, InMemorySpanExporter] = {}


def _scope_key(scope: str | None) -> str:
    return (scope or "").strip().lower() or DEFAULT_SCOPE


def get_or_create_span_exporter(scope: str = DEFAULT_SCOPE) -> InMemorySpanExporter:
    """Return the in-memory exporter for a logical scope, creating it on first use."""
    key = _scope_key(scope)
    with _lock:
        exporter = _span_exporters.get(key)
        if exporter is None:
            exporter = InMemorySpanExporter()
            _span_exporters[key] = exporter
        return exporter


def get_finished_spans(scope: str = DEFAULT_SCOPE) -> Sequence:
    """Fetch finished spans captured for a scope."""
    return get_or_create_span_exporter(scope).get_finished_spans()


def clear_span_exporter(scope: str = DEFAULT_SCOPE) -> None:
    """Clear captured spans for a scope, keeping the exporter registered."""
    get_or_create_span_exporter(scope).clear()
