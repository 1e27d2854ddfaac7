"""Throttled progress logging for chart generation."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

CHART_STEPS = (
    "Validating input data",
    "Processing data values",
    "Calculating chart dimensions",
    "Generating ASCII grid",
    "Rendering chart elements",
    "Applying colors and formatting",
)


class ProgressReporter:
    """Log progress updates for one operation, at most once per interval.

    Updates at 100% are always emitted.
    """

    def __init__(
        self,
        operation: str,
        min_interval_ms: float = 100,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.operation = operation
        self.min_interval_ms = min_interval_ms
        self._clock = clock
        self.started_at = clock()
        self._last_report: Optional[float] = None
        logger.info("event=progress_started operation=%s", operation)

    def _elapsed_ms(self) -> float:
        return (self._clock() - self.started_at) * 1000

    def report(
        self, progress: float, message: Optional[str] = None, **details: Any
    ) -> Optional[Dict[str, Any]]:
        """Emit an update unless throttled; returns the update that was logged."""
        now = self._clock()
        throttled = (
            self._last_report is not None
            and (now - self._last_report) * 1000 < self.min_interval_ms
        )
        if throttled and progress < 100:
            return None

        self._last_report = now
        elapsed = self._elapsed_ms()
        update = {
            "operation": self.operation,
            "progress": min(max(progress, 0.0), 100.0),
            "message": message,
            "elapsed_ms": elapsed,
            "estimated_total_ms": elapsed / progress * 100 if progress > 0 else None,
            **details,
        }
        logger.info(
            "event=progress_update operation=%s progress=%.0f message=%s elapsed_ms=%.1f",
            self.operation,
            update["progress"],
            message,
            elapsed,
        )
        return update

    def complete(self, message: Optional[str] = None) -> None:
        self.report(100, message or "Operation completed")
        logger.info(
            "event=progress_completed operation=%s elapsed_ms=%.1f",
            self.operation,
            self._elapsed_ms(),
        )

    def fail(self, error: BaseException) -> None:
        logger.error(
            "event=progress_failed operation=%s elapsed_ms=%.1f error_type=%s error=%s",
            self.operation,
            self._elapsed_ms(),
            type(error).__name__,
            error,
        )


class StepProgressReporter(ProgressReporter):
    """Progress over a known number of steps."""

    def __init__(self, operation: str, total_steps: int, **kwargs: Any):
        super().__init__(operation, **kwargs)
        self.total_steps = total_steps
        self.current_step = 0

    def next_step(self, step_name: Optional[str] = None) -> Optional[Dict[str, Any]]:
        return self.set_step(self.current_step + 1, step_name)

    def set_step(self, step: int, step_name: Optional[str] = None) -> Optional[Dict[str, Any]]:
        self.current_step = step
        return self.report(
            step / self.total_steps * 100,
            step_name,
            step=step,
            total_steps=self.total_steps,
        )


def create_chart_progress_reporter(
    chart_type: str, data_size: int, **kwargs: Any
) -> StepProgressReporter:
    reporter = StepProgressReporter(f"generate_{chart_type}_chart", len(CHART_STEPS), **kwargs)
    logger.info(
        "event=chart_generation_started chart_type=%s data_size=%d steps=%d",
        chart_type,
        data_size,
        len(CHART_STEPS),
    )
    return reporter
