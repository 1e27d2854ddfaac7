"""Server-scoped state handed to every tool handler.

The monitor, initialization state and time budgets are built once by the
server entrypoint and passed to handlers as a keyword-only ``context``
argument. :func:`bind_server_context` hides that argument from the tool
schema FastMCP derives from the handler signature.
"""

import functools
import inspect
import typing
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, TypeVar

from common.observability.monitor import ServiceMonitor
from mcp_server.models.health import InitializationState
from mcp_server.utils.timeout import TimeoutConfig

R = TypeVar("R")

CONTEXT_PARAM = "context"


@dataclass
class ServerContext:
    monitor: ServiceMonitor = field(default_factory=ServiceMonitor)
    init_state: InitializationState = field(default_factory=InitializationState)
    timeouts: TimeoutConfig = field(default_factory=TimeoutConfig)


def bind_server_context(
    func: Callable[..., Awaitable[R]], context: ServerContext
) -> Callable[..., Awaitable[R]]:
    """Return ``func`` with ``context`` pre-bound and removed from its signature."""
    signature = inspect.signature(func)
    if CONTEXT_PARAM not in signature.parameters:
        raise TypeError(f"{func.__name__} does not accept a '{CONTEXT_PARAM}' argument")

    hints = typing.get_type_hints(inspect.unwrap(func))
    hints.pop(CONTEXT_PARAM, None)

    @functools.wraps(func)
    async def bound(*args: Any, **kwargs: Any) -> R:
        return await func(*args, context=context, **kwargs)

    bound.__signature__ = signature.replace(
        parameters=[p for p in signature.parameters.values() if p.name != CONTEXT_PARAM]
    )
    bound.__annotations__ = hints
    # Tool introspection must see the public signature, not the wrapped handler's.
    del bound.__wrapped__
    return bound
