"""Startup-time configuration sanity checks for the chart MCP server."""

from __future__ import annotations

from typing import Iterable, Optional

from common.config.env import get_env_bool, get_env_int, get_env_str

TRANSPORTS = ("stdio", "sse", "http", "streamable-http")
OTEL_TEST_EXPORTERS = ("in_memory", "none", "otlp")

DEFAULT_VALIDATION_TIMEOUT_MS = 5000
DEFAULT_GENERATION_TIMEOUT_MS = 30000


def _normalize_mode(
    name: str,
    *,
    allowed: Iterable[str],
    default: str,
    issues: list[str],
) -> str:
    raw_value = get_env_str(name, default) or default
    normalized = raw_value.strip().lower()
    allowed_values = set(allowed)
    if normalized not in allowed_values:
        issues.append(f"{name} must be one of {sorted(allowed_values)}, got '{raw_value}'.")
        return default
    return normalized


def _read_bool(name: str, default: bool, issues: list[str]) -> bool:
    try:
        value = get_env_bool(name, default)
    except ValueError as exc:
        issues.append(str(exc))
        return default
    if value is None:
        return default
    return bool(value)


def _read_min_int(name: str, *, minimum: int, default: int, issues: list[str]) -> Optional[int]:
    try:
        parsed = get_env_int(name, default)
    except ValueError as exc:
        issues.append(str(exc))
        return None
    if parsed is None:
        return default
    if int(parsed) < int(minimum):
        issues.append(f"{name} must be >= {minimum}, got {parsed}.")
        return None
    return int(parsed)


def validate_runtime_configuration() -> None:
    """Validate runtime configuration for incompatible or malformed settings.

    Raises:
        RuntimeError: when one or more invalid combinations are detected.
    """
    issues: list[str] = []

    _normalize_mode("MCP_TRANSPORT", allowed=TRANSPORTS, default="stdio", issues=issues)
    _read_min_int("MCP_PORT", minimum=1, default=8000, issues=issues)

    validation_ms = _read_min_int(
        "CHART_VALIDATION_TIMEOUT_MS",
        minimum=1,
        default=DEFAULT_VALIDATION_TIMEOUT_MS,
        issues=issues,
    )
    generation_ms = _read_min_int(
        "CHART_GENERATION_TIMEOUT_MS",
        minimum=1,
        default=DEFAULT_GENERATION_TIMEOUT_MS,
        issues=issues,
    )
    if validation_ms is not None and generation_ms is not None and validation_ms > generation_ms:
        issues.append(
            "CHART_VALIDATION_TIMEOUT_MS must not exceed CHART_GENERATION_TIMEOUT_MS "
            f"({validation_ms} > {generation_ms})."
        )

    _read_min_int("MONITOR_HEALTH_LOG_INTERVAL_SECONDS", minimum=1, default=60, issues=issues)
    _read_min_int("MONITOR_CLEANUP_INTERVAL_SECONDS", minimum=1, default=3600, issues=issues)
    _read_min_int("MONITOR_ERROR_RETENTION_SECONDS", minimum=1, default=86400, issues=issues)

    _read_bool("OTEL_DISABLE_EXPORTER", False, issues)
    _read_bool("MCP_OBSERVABILITY_METRICS_ENABLED", False, issues)
    if get_env_str("OTEL_TEST_EXPORTER") is not None:
        _normalize_mode(
            "OTEL_TEST_EXPORTER", allowed=OTEL_TEST_EXPORTERS, default="none", issues=issues
        )

    if issues:
        error_lines = "\n".join(f"- {issue}" for issue in issues)
        raise RuntimeError(f"Invalid runtime configuration:\n{error_lines}")
