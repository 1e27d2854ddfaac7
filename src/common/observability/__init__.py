"""Shared observability helpers."""

from common.observability.metrics import mcp_metrics
from common.observability.monitor import ServiceMonitor

__all__ = ["ServiceMonitor", "mcp_metrics"]
