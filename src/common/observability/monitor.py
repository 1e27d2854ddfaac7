"""In-process service monitor: active requests, error patterns and health."""

from __future__ import annotations

import logging
import resource
import sys
import threading
import time
from collections import deque
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Deque, Dict, List, Set

from common.observability.metrics import mcp_metrics

logger = logging.getLogger(__name__)

MAX_ERROR_CONTEXTS = 10
ERROR_RATE_WINDOW_SECONDS = 3600
DEFAULT_ERROR_RETENTION_SECONDS = 86400
MAX_ACTIVE_REQUESTS = 100
MAX_ERROR_RATE = 0.1
DEGRADED_PASS_RATIO = 0.7

HEALTHY = "healthy"
DEGRADED = "degraded"
UNHEALTHY = "unhealthy"


@dataclass
class ErrorPattern:
    """Occurrences of one exception type."""

    error_type: str
    count: int
    last_occurrence: float
    contexts: List[str] = field(default_factory=list)


@dataclass
class ResourceMetrics:
    uptime_seconds: float
    active_requests: int
    max_rss_mb: float
    cpu_user_seconds: float
    cpu_system_seconds: float


def _max_rss_mb() -> float:
    usage = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # ru_maxrss is bytes on macOS and kilobytes elsewhere.
    if sys.platform == "darwin":
        return usage / (1024 * 1024)
    return usage / 1024


class ServiceMonitor:
    """Thread-safe monitor shared by every tool call of one server process."""

    def __init__(
        self,
        *,
        memory_limit_mb: float = 1024.0,
        error_retention_seconds: float = DEFAULT_ERROR_RETENTION_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize the monitor; ``clock`` returns epoch seconds."""
        self.memory_limit_mb = memory_limit_mb
        self.error_retention_seconds = error_retention_seconds
        self._clock = clock
        self._started_at = clock()
        self._cpu_start = resource.getrusage(resource.RUSAGE_SELF)
        self._active: Set[str] = set()
        self._recent_requests: Deque[float] = deque(maxlen=10000)
        self._errors: Dict[str, ErrorPattern] = {}
        self._lock = threading.Lock()

    def track_request(self, request_id: str) -> None:
        with self._lock:
            self._active.add(request_id)
            self._recent_requests.append(self._clock())
            active = len(self._active)
        logger.debug("Request tracked: request_id=%s active=%d", request_id, active)

    def untrack_request(self, request_id: str) -> None:
        with self._lock:
            self._active.discard(request_id)
            active = len(self._active)
        logger.debug("Request untracked: request_id=%s active=%d", request_id, active)

    @property
    def active_requests(self) -> int:
        with self._lock:
            return len(self._active)

    def record_error(self, error: BaseException, context: str = "unknown") -> ErrorPattern:
        """Count ``error`` under its type name, keeping the most recent contexts."""
        error_type = type(error).__name__
        now = self._clock()
        with self._lock:
            pattern = self._errors.get(error_type)
            if pattern is None:
                pattern = ErrorPattern(error_type=error_type, count=0, last_occurrence=now)
                self._errors[error_type] = pattern
            pattern.count += 1
            pattern.last_occurrence = now
            pattern.contexts.append(context)
            del pattern.contexts[:-MAX_ERROR_CONTEXTS]
            total = pattern.count

        mcp_metrics.add_counter(
            "mcp.monitor.errors_total",
            description="Count of errors recorded by the service monitor",
            attributes={"error_type": error_type},
        )
        logger.warning(
            "event=error_pattern_recorded error_type=%s context=%s total=%d message=%s",
            error_type,
            context,
            total,
            error,
        )
        return pattern

    def error_patterns(self) -> List[ErrorPattern]:
        with self._lock:
            return [
                ErrorPattern(p.error_type, p.count, p.last_occurrence, list(p.contexts))
                for p in self._errors.values()
            ]

    def resource_metrics(self) -> ResourceMetrics:
        usage = resource.getrusage(resource.RUSAGE_SELF)
        return ResourceMetrics(
            uptime_seconds=self._clock() - self._started_at,
            active_requests=self.active_requests,
            max_rss_mb=_max_rss_mb(),
            cpu_user_seconds=usage.ru_utime - self._cpu_start.ru_utime,
            cpu_system_seconds=usage.ru_stime - self._cpu_start.ru_stime,
        )

    def recent_error_rate(self) -> float:
        """Errors per request over the last hour."""
        cutoff = self._clock() - ERROR_RATE_WINDOW_SECONDS
        with self._lock:
            errors = sum(p.count for p in self._errors.values() if p.last_occurrence >= cutoff)
            requests = sum(1 for ts in self._recent_requests if ts >= cutoff)
        return errors / max(requests, 1)

    def health_status(self) -> Dict[str, Any]:
        """Run the health checks and classify the result.

        All checks passing is healthy, at least 70% passing is degraded and
        anything less is unhealthy.
        """
        metrics = self.resource_metrics()
        checks = {
            "memory_healthy": metrics.max_rss_mb < self.memory_limit_mb,
            "active_requests_healthy": metrics.active_requests < MAX_ACTIVE_REQUESTS,
            "error_rate_healthy": self.recent_error_rate() < MAX_ERROR_RATE,
            "uptime_healthy": metrics.uptime_seconds > 0,
        }
        passed = sum(1 for ok in checks.values() if ok)
        if passed == len(checks):
            status = HEALTHY
        elif passed >= len(checks) * DEGRADED_PASS_RATIO:
            status = DEGRADED
        else:
            status = UNHEALTHY

        return {
            "status": status,
            "checks": checks,
            "metrics": asdict(metrics),
            "errors": [asdict(p) for p in self.error_patterns()],
            "last_updated": datetime.now(timezone.utc).isoformat(),
        }

    def log_health_status(self) -> Dict[str, Any]:
        health = self.health_status()
        logger.info(
            "event=health_status status=%s active_requests=%d max_rss_mb=%.1f "
            "error_patterns=%d uptime_s=%.1f",
            health["status"],
            health["metrics"]["active_requests"],
            health["metrics"]["max_rss_mb"],
            len(health["errors"]),
            health["metrics"]["uptime_seconds"],
        )
        return health

    def cleanup(self) -> int:
        """Drop error patterns not seen within the retention window."""
        cutoff = self._clock() - self.error_retention_seconds
        with self._lock:
            stale = [name for name, p in self._errors.items() if p.last_occurrence < cutoff]
            for name in stale:
                del self._errors[name]
            remaining = len(self._errors)
            active = len(self._active)

        for name in stale:
            logger.debug("Old error pattern cleaned up: error_type=%s", name)
        logger.info(
            "event=monitor_cleanup removed=%d remaining_error_patterns=%d active_requests=%d",
            len(stale),
            remaining,
            active,
        )
        return len(stale)

    def shutdown(self, reason: str = "shutdown") -> None:
        """Log the final health snapshot and clear state."""
        logger.info("event=graceful_shutdown reason=%s", reason)
        self.log_health_status()
        self.cleanup()
        with self._lock:
            self._active.clear()
        logger.info("event=graceful_shutdown_completed")
