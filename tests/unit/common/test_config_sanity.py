"""Unit tests for runtime configuration sanity validation."""

import pytest

from common.config.sanity import validate_runtime_configuration


def test_validate_runtime_configuration_allows_defaults():
    """Default configuration should pass sanity validation."""
    validate_runtime_configuration()


def test_validate_runtime_configuration_accepts_explicit_valid_values(monkeypatch):
    monkeypatch.setenv("MCP_TRANSPORT", "SSE")
    monkeypatch.setenv("MCP_PORT", "9000")
    monkeypatch.setenv("CHART_VALIDATION_TIMEOUT_MS", "100")
    monkeypatch.setenv("CHART_GENERATION_TIMEOUT_MS", "100")
    monkeypatch.setenv("OTEL_TEST_EXPORTER", "in_memory")
    monkeypatch.setenv("MCP_OBSERVABILITY_METRICS_ENABLED", "yes")

    validate_runtime_configuration()


def test_validate_runtime_configuration_rejects_invalid_transport(monkeypatch):
    """Invalid enum values should fail with clear mode-specific messaging."""
    monkeypatch.setenv("MCP_TRANSPORT", "websocket")

    with pytest.raises(RuntimeError) as exc_info:
        validate_runtime_configuration()

    assert "MCP_TRANSPORT" in str(exc_info.value)


def test_validate_runtime_configuration_rejects_non_positive_timeout(monkeypatch):
    monkeypatch.setenv("CHART_GENERATION_TIMEOUT_MS", "0")

    with pytest.raises(RuntimeError) as exc_info:
        validate_runtime_configuration()

    assert "CHART_GENERATION_TIMEOUT_MS must be >= 1, got 0." in str(exc_info.value)


def test_validate_runtime_configuration_rejects_validation_budget_above_generation(monkeypatch):
    """Validation should never be allowed more time than the whole generation."""
    monkeypatch.setenv("CHART_VALIDATION_TIMEOUT_MS", "2000")
    monkeypatch.setenv("CHART_GENERATION_TIMEOUT_MS", "1000")

    with pytest.raises(RuntimeError) as exc_info:
        validate_runtime_configuration()

    assert "must not exceed CHART_GENERATION_TIMEOUT_MS" in str(exc_info.value)


def test_validate_runtime_configuration_rejects_malformed_values(monkeypatch):
    monkeypatch.setenv("MCP_PORT", "eighty")
    monkeypatch.setenv("OTEL_DISABLE_EXPORTER", "maybe")

    with pytest.raises(RuntimeError) as exc_info:
        validate_runtime_configuration()

    message = str(exc_info.value)
    assert "MCP_PORT" in message
    assert "OTEL_DISABLE_EXPORTER" in message


def test_validate_runtime_configuration_reports_every_issue(monkeypatch):
    """All issues should be reported at once, one bullet per issue."""
    monkeypatch.setenv("MCP_TRANSPORT", "websocket")
    monkeypatch.setenv("MONITOR_CLEANUP_INTERVAL_SECONDS", "0")
    monkeypatch.setenv("OTEL_TEST_EXPORTER", "console")

    with pytest.raises(RuntimeError) as exc_info:
        validate_runtime_configuration()

    message = str(exc_info.value)
    assert message.startswith("Invalid runtime configuration:\n- ")
    assert message.count("\n- ") == 3
