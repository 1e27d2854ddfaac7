"""Time budgets for the blocking validation and rendering steps."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from common.config.env import get_env_int
from common.config.sanity import DEFAULT_GENERATION_TIMEOUT_MS, DEFAULT_VALIDATION_TIMEOUT_MS

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ChartTimeoutError(TimeoutError):
    """An operation did not finish within its budget."""

    def __init__(self, operation: str, timeout_ms: int):
        super().__init__(f"Operation '{operation}' timed out after {timeout_ms}ms")
        self.operation = operation
        self.timeout_ms = timeout_ms


@dataclass(frozen=True)
class TimeoutConfig:
    validation_ms: int = DEFAULT_VALIDATION_TIMEOUT_MS
    generation_ms: int = DEFAULT_GENERATION_TIMEOUT_MS

    @classmethod
    def from_env(cls) -> "TimeoutConfig":
        return cls(
            validation_ms=get_env_int("CHART_VALIDATION_TIMEOUT_MS", DEFAULT_VALIDATION_TIMEOUT_MS),
            generation_ms=get_env_int("CHART_GENERATION_TIMEOUT_MS", DEFAULT_GENERATION_TIMEOUT_MS),
        )


async def with_timeout(
    func: Callable[..., T], *args: Any, timeout_ms: int, operation: str
) -> T:
    """Run blocking ``func(*args)`` in a worker thread, waiting at most ``timeout_ms``.

    On timeout the caller stops waiting and gets :class:`ChartTimeoutError`;
    the worker thread itself is not interrupted and its result is discarded.
    """
    try:
        return await asyncio.wait_for(asyncio.to_thread(func, *args), timeout=timeout_ms / 1000)
    except asyncio.TimeoutError as exc:
        error = ChartTimeoutError(operation, timeout_ms)
        logger.error("event=operation_timeout operation=%s timeout_ms=%d", operation, timeout_ms)
        raise error from exc
