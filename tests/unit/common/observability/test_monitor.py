"""Tests for the in-process service monitor."""

import pytest

from common.observability.monitor import DEGRADED, HEALTHY, UNHEALTHY, ServiceMonitor


class FakeClock:
    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def monitor(clock):
    monitor = ServiceMonitor(clock=clock)
    clock.advance(1)
    return monitor


def test_track_and_untrack_requests(monitor):
    monitor.track_request("a")
    monitor.track_request("b")
    assert monitor.active_requests == 2

    monitor.untrack_request("a")
    monitor.untrack_request("missing")
    assert monitor.active_requests == 1


def test_record_error_groups_by_type_and_keeps_recent_contexts(monitor):
    for i in range(12):
        monitor.record_error(ValueError("bad"), f"ctx_{i}")
    monitor.record_error(RuntimeError("boom"), "tool_create_line_chart")

    patterns = {p.error_type: p for p in monitor.error_patterns()}
    assert patterns["ValueError"].count == 12
    assert patterns["ValueError"].contexts == [f"ctx_{i}" for i in range(2, 12)]
    assert patterns["RuntimeError"].contexts == ["tool_create_line_chart"]


def test_error_patterns_returns_copies(monitor):
    monitor.record_error(ValueError("bad"))
    monitor.error_patterns()[0].contexts.append("mutated")
    assert monitor.error_patterns()[0].contexts == ["unknown"]


def test_recent_error_rate_uses_last_hour(monitor, clock):
    for i in range(10):
        monitor.track_request(str(i))
    monitor.record_error(ValueError("bad"))
    assert monitor.recent_error_rate() == pytest.approx(0.1)

    clock.advance(3601)
    assert monitor.recent_error_rate() == 0


def test_health_status_healthy(monitor):
    health = monitor.health_status()

    assert health["status"] == HEALTHY
    assert all(health["checks"].values())
    assert health["metrics"]["uptime_seconds"] == 1
    assert health["errors"] == []
    assert "last_updated" in health


def test_health_status_degraded_when_one_check_fails(monitor):
    monitor.track_request("r")
    monitor.record_error(ValueError("bad"))

    health = monitor.health_status()

    assert health["checks"]["error_rate_healthy"] is False
    assert health["status"] == DEGRADED
    assert health["errors"][0]["error_type"] == "ValueError"


def test_health_status_unhealthy_when_several_checks_fail(clock):
    monitor = ServiceMonitor(memory_limit_mb=0, clock=clock)
    monitor.record_error(ValueError("bad"))

    health = monitor.health_status()

    assert health["checks"]["memory_healthy"] is False
    assert health["checks"]["uptime_healthy"] is False
    assert health["status"] == UNHEALTHY


def test_cleanup_drops_stale_error_patterns(clock):
    monitor = ServiceMonitor(error_retention_seconds=60, clock=clock)
    monitor.record_error(ValueError("old"))
    clock.advance(120)
    monitor.record_error(KeyError("new"))

    assert monitor.cleanup() == 1
    assert [p.error_type for p in monitor.error_patterns()] == ["KeyError"]


def test_shutdown_clears_active_requests(monitor):
    monitor.track_request("r")
    monitor.shutdown("test")
    assert monitor.active_requests == 0


def test_log_health_status_returns_snapshot(monitor, caplog):
    with caplog.at_level("INFO", logger="common.observability.monitor"):
        health = monitor.log_health_status()

    assert health["status"] == HEALTHY
    assert "event=health_status" in caplog.text
