"""Tracing wrapper for MCP tools.

Each call gets a ``mcp.tool.<name>`` SERVER span, a request id in
``request_id_var``, a slot in the service monitor's active requests and the
call counter/duration metrics. Failures reported inside the response
envelope mark the span as an error without raising.
"""

import functools
import json
import logging
import time
import uuid
from typing import Any, Awaitable, Callable, Optional, ParamSpec, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from common.models.tool_versions import get_tool_version
from common.observability.context import request_id_var
from common.observability.metrics import record_tool_call

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def _extract_envelope_error_category(response: Any) -> Optional[str]:
    """Extract envelope-level error category from a response payload, if present."""
    payload: Any = response
    if isinstance(response, str):
        try:
            payload = json.loads(response)
        except json.JSONDecodeError:
            return None
    elif hasattr(response, "model_dump"):
        payload = response.model_dump(mode="json")

    if not isinstance(payload, dict):
        return None
    error_payload = payload.get("error")
    if error_payload is None:
        return None
    if isinstance(error_payload, dict):
        category = error_payload.get("category")
        return str(category) if category is not None else "unknown"
    return "unknown"


def _data_points(kwargs: dict) -> Optional[int]:
    data = kwargs.get("data")
    return len(data) if isinstance(data, (list, tuple)) else None


def _request_size(kwargs: dict) -> Optional[int]:
    public = {k: v for k, v in kwargs.items() if k != "context"}
    try:
        return len(json.dumps(public, default=str).encode("utf-8"))
    except (TypeError, ValueError):
        return None


def trace_tool(tool_name: str) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Add OpenTelemetry tracing and request bookkeeping to an MCP tool handler.

    Args:
        tool_name: The name of the tool (e.g. "create_line_chart").
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            tracer = trace.get_tracer("mcp.server")
            context = kwargs.get("context")
            monitor = getattr(context, "monitor", None)

            request_id = request_id_var.get() or uuid.uuid4().hex
            request_token = request_id_var.set(request_id)
            data_points = _data_points(kwargs)

            with tracer.start_as_current_span(
                f"mcp.tool.{tool_name}", kind=trace.SpanKind.SERVER
            ) as span:
                span.set_attribute("mcp.tool.name", tool_name)
                span.set_attribute("mcp.tool.version", get_tool_version(tool_name))
                span.set_attribute("mcp.request_id", request_id)
                if data_points is not None:
                    span.set_attribute("mcp.tool.data_points", data_points)
                req_size = _request_size(kwargs)
                if req_size is not None:
                    span.set_attribute("mcp.tool.request.size_bytes", req_size)

                logger.info(
                    "event=tool_request_received tool=%s request_id=%s data_points=%s",
                    tool_name,
                    request_id,
                    data_points,
                )
                if monitor is not None:
                    monitor.track_request(request_id)

                started_at = time.monotonic()
                try:
                    response = await func(*args, **kwargs)
                except Exception as e:
                    duration_ms = max(0.0, (time.monotonic() - started_at) * 1000.0)
                    span.set_attribute("mcp.tool.duration_ms", duration_ms)
                    span.record_exception(e)
                    span.set_status(Status(StatusCode.ERROR, str(e)))
                    span.set_attribute("mcp.tool.error.category", "internal")
                    if monitor is not None:
                        monitor.record_error(e, f"tool_{tool_name}")
                    record_tool_call(
                        tool_name,
                        outcome="error",
                        duration_ms=duration_ms,
                        data_points=data_points,
                        error_category="internal",
                    )
                    logger.exception(
                        "event=tool_request_failed tool=%s request_id=%s duration_ms=%.1f",
                        tool_name,
                        request_id,
                        duration_ms,
                    )
                    raise
                finally:
                    if monitor is not None:
                        monitor.untrack_request(request_id)
                    request_id_var.reset(request_token)

                duration_ms = max(0.0, (time.monotonic() - started_at) * 1000.0)
                span.set_attribute("mcp.tool.duration_ms", duration_ms)
                span.set_attribute("mcp.tool.response.size_bytes", len(str(response).encode()))

                error_category = _extract_envelope_error_category(response)
                if error_category is not None:
                    span.set_status(Status(StatusCode.ERROR))
                    span.set_attribute("mcp.tool.error.category", error_category)
                    outcome = "error"
                else:
                    span.set_status(Status(StatusCode.OK))
                    outcome = "success"

                record_tool_call(
                    tool_name,
                    outcome=outcome,
                    duration_ms=duration_ms,
                    data_points=data_points,
                    error_category=error_category,
                )
                logger.info(
                    "event=tool_request_completed tool=%s request_id=%s outcome=%s "
                    "duration_ms=%.1f",
                    tool_name,
                    request_id,
                    outcome,
                    duration_ms,
                )
                return response

        return wrapper

    return decorator
