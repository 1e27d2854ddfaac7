"""Unit test environment helpers."""

import pytest

from mcp_server.utils.context import ServerContext
from mcp_server.utils.timeout import TimeoutConfig

_CHART_ENV = (
    "CHART_VALIDATION_TIMEOUT_MS",
    "CHART_GENERATION_TIMEOUT_MS",
    "MCP_TRANSPORT",
    "MCP_PORT",
    "MCP_HOST",
    "MCP_CORS_ORIGINS",
    "MONITOR_ERROR_RETENTION_SECONDS",
    "MONITOR_HEALTH_LOG_INTERVAL_SECONDS",
    "MONITOR_CLEANUP_INTERVAL_SECONDS",
    "MCP_OBSERVABILITY_METRICS_ENABLED",
    "OTEL_DISABLE_EXPORTER",
)


@pytest.fixture(autouse=True)
def _minimal_env(monkeypatch):
    """Set minimal env defaults for unit tests without external deps."""
    for name in _CHART_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("OTEL_TEST_EXPORTER", "none")
    yield


@pytest.fixture
def server_context():
    """Fresh server state with default time budgets."""
    return ServerContext(timeouts=TimeoutConfig())
