"""Optional low-cardinality metrics for chart tool calls.

Metrics are emitted only when ``MCP_OBSERVABILITY_METRICS_ENABLED`` says so,
or, when that flag is unset, when an OTLP endpoint is configured. Emission
failures are logged at debug level and never reach the tool call.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from opentelemetry import metrics

from common.config.env import get_env_bool

logger = logging.getLogger(__name__)

COUNTER = "counter"
HISTOGRAM = "histogram"


def is_otel_exporter_configured() -> bool:
    """True when the environment points OTEL metrics at an external collector."""
    if get_env_bool("OTEL_DISABLE_EXPORTER", False):
        return False
    if (os.getenv("OTEL_METRICS_EXPORTER") or "").strip().lower() == "none":
        return False
    endpoints = ("OTEL_EXPORTER_OTLP_ENDPOINT", "OTEL_EXPORTER_OTLP_METRICS_ENDPOINT")
    return any((os.getenv(name) or "").strip() for name in endpoints)


def is_metrics_enabled(enabled_env_var: str) -> bool:
    """An explicit flag wins; otherwise follow the exporter configuration."""
    raw = os.getenv(enabled_env_var)
    if raw is None:
        return is_otel_exporter_configured()
    try:
        return get_env_bool(enabled_env_var, False) is True
    except ValueError:
        logger.warning("Invalid %s value '%s'; metrics disabled.", enabled_env_var, raw)
        return False


def _attribute_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return value
    return str(value)


def _normalize_attributes(attributes: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    return {k: _attribute_value(v) for k, v in (attributes or {}).items() if v is not None}


@dataclass
class OptionalMetrics:
    """OTEL meter wrapper that is a no-op unless metrics are enabled."""

    meter_name: str
    enabled_env_var: str
    _meter: Any = None
    _instruments: Dict[Tuple[str, str], Any] = field(default_factory=dict)

    def _instrument(self, kind: str, name: str, description: str, unit: str) -> Any:
        key = (kind, name)
        instrument = self._instruments.get(key)
        if instrument is None:
            if self._meter is None:
                self._meter = metrics.get_meter(self.meter_name)
            create = (
                self._meter.create_counter if kind == COUNTER else self._meter.create_histogram
            )
            instrument = create(name=name, description=description, unit=unit)
            self._instruments[key] = instrument
        return instrument

    def _emit(
        self,
        kind: str,
        name: str,
        value: float,
        description: str,
        unit: str,
        attributes: Optional[Dict[str, Any]],
    ) -> None:
        if not is_metrics_enabled(self.enabled_env_var):
            return
        try:
            instrument = self._instrument(kind, name, description, unit)
            if kind == COUNTER:
                instrument.add(int(value), _normalize_attributes(attributes))
            else:
                instrument.record(float(value), _normalize_attributes(attributes))
        except Exception as exc:
            logger.debug("Metric emission failed for %s %s: %s", kind, name, exc)

    def add_counter(
        self,
        name: str,
        value: int = 1,
        *,
        description: str = "",
        unit: str = "1",
        attributes: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._emit(COUNTER, name, value, description, unit, attributes)

    def record_histogram(
        self,
        name: str,
        value: float,
        *,
        description: str = "",
        unit: str = "1",
        attributes: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._emit(HISTOGRAM, name, value, description, unit, attributes)


mcp_metrics = OptionalMetrics(
    meter_name="ascii-charts-mcp",
    enabled_env_var="MCP_OBSERVABILITY_METRICS_ENABLED",
)


def record_tool_call(
    tool_name: str,
    *,
    outcome: str,
    duration_ms: float,
    data_points: Optional[int] = None,
    error_category: Optional[str] = None,
) -> None:
    """Emit the per-call counter, duration histogram and error counter."""
    attributes = {"tool": tool_name, "outcome": outcome}
    mcp_metrics.add_counter(
        "mcp.tool.calls_total",
        description="Count of chart tool calls by outcome",
        attributes=attributes,
    )
    mcp_metrics.record_histogram(
        "mcp.tool.duration_ms",
        duration_ms,
        unit="ms",
        description="Chart tool call duration in milliseconds",
        attributes=attributes,
    )
    if data_points is not None:
        mcp_metrics.record_histogram(
            "mcp.tool.data_points",
            data_points,
            description="Number of input values per chart tool call",
            attributes={"tool": tool_name},
        )
    if error_category:
        mcp_metrics.add_counter(
            "mcp.tool.errors_total",
            description="Count of chart tool failures by error category",
            attributes={"tool": tool_name, "category": error_category},
        )
