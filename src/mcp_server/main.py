"""MCP Server entrypoint for the ASCII chart tools.

This module initializes telemetry and the FastMCP server, and registers the
chart tools via the central registry.
"""

import asyncio
import logging
import os
import sys
from contextlib import asynccontextmanager, suppress
from typing import Awaitable, Callable, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SimpleSpanProcessor

from common.config.env import get_env_bool, get_env_choice, get_env_int, get_env_str
from common.config.sanity import TRANSPORTS
from common.observability.monitor import ServiceMonitor
from mcp_server.models.health import InitializationState
from mcp_server.tools.registry import register_all
from mcp_server.utils.context import ServerContext
from mcp_server.utils.timeout import TimeoutConfig

# Load environment variables
load_dotenv()

# Configure logging at the start; stderr keeps the stdio transport clean.
logging.basicConfig(
    level=(get_env_str("LOG_LEVEL", "INFO") or "INFO").upper(),
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

SERVER_NAME = "ascii-charts"


def setup_telemetry() -> Optional[TracerProvider]:
    """Initialize the OTEL SDK for the MCP server.

    Returns the provider, or None when OTEL setup failed.
    """
    service_name = get_env_str("OTEL_SERVICE_NAME", "ascii-charts-mcp")
    endpoint = get_env_str("OTEL_EXPORTER_OTLP_ENDPOINT", "http://otel-collector:4317")

    provider = TracerProvider(resource=Resource.create({SERVICE_NAME: service_name}))
    trace.set_tracer_provider(provider)

    if get_env_bool("OTEL_DISABLE_EXPORTER", False):
        logger.info("OTEL initialized without exporter (OTEL_DISABLE_EXPORTER=true)")
        return provider

    is_pytest = "PYTEST_CURRENT_TEST" in os.environ
    exporter_mode_default = "in_memory" if is_pytest else "otlp"
    exporter_mode = (
        (get_env_str("OTEL_TEST_EXPORTER", exporter_mode_default) or exporter_mode_default)
        .strip()
        .lower()
    )

    try:
        if exporter_mode == "none":
            logger.info("OTEL initialized without exporter (OTEL_TEST_EXPORTER=none)")
            return provider
        if exporter_mode == "in_memory":
            from common.observability.in_memory_exporter import get_or_create_span_exporter

            provider.add_span_processor(SimpleSpanProcessor(get_or_create_span_exporter("mcp")))
            logger.info("OTEL initialized with in-memory exporter (scope=mcp)")
            return provider

        provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint)))
        logger.info("OTEL initialized for MCP Server: %s", service_name)
    except Exception as exc:
        logger.exception("Failed to initialize MCP OTEL exporter; continuing degraded: %s", exc)
        return None
    return provider


def build_server_context() -> ServerContext:
    return ServerContext(
        monitor=ServiceMonitor(
            error_retention_seconds=get_env_int("MONITOR_ERROR_RETENTION_SECONDS", 86400),
        ),
        init_state=InitializationState(),
        timeouts=TimeoutConfig.from_env(),
    )


async def _run_periodically(
    name: str, interval_seconds: float, action: Callable[[], object]
) -> None:
    while True:
        await asyncio.sleep(interval_seconds)
        try:
            action()
        except Exception:
            logger.exception("Periodic task %s failed", name)


def create_lifespan(
    context: ServerContext, telemetry: Optional[TracerProvider]
) -> Callable[[FastMCP], Awaitable]:
    """Build the lifespan that runs startup checks and the monitor's periodic tasks."""

    @asynccontextmanager
    async def lifespan(app):
        init_state = context.init_state
        init_state.start()

        # Startup: Validate runtime configuration combinations (required)
        try:
            from common.config.sanity import validate_runtime_configuration

            validate_runtime_configuration()
            init_state.record_success("config_sanity", required=True)
        except Exception as e:
            logger.exception("Runtime configuration sanity check failed")
            init_state.record_failure("config_sanity", e, required=True)
            raise RuntimeError("Runtime configuration sanity check failed") from e

        if telemetry is None:
            init_state.record_failure(
                "telemetry", RuntimeError("OTEL exporter setup failed"), required=False
            )
        else:
            init_state.record_success("telemetry", required=False)

        # Startup: every renderer must produce output (required)
        try:
            from mcp_server.health import run_renderer_self_test

            run_renderer_self_test()
            init_state.record_success("renderer_self_test", required=True)
        except Exception as e:
            logger.exception("Renderer self-test failed")
            init_state.record_failure("renderer_self_test", e, required=True)

        init_state.complete()
        if init_state.is_ready:
            logger.info("MCP server initialization complete - ready")
        else:
            failed = [c.name for c in init_state.failed_checks]
            logger.warning("MCP server initialization complete with failures: %s", failed)

        monitor = context.monitor
        tasks = [
            asyncio.create_task(
                _run_periodically(
                    "health_log",
                    get_env_int("MONITOR_HEALTH_LOG_INTERVAL_SECONDS", 60),
                    monitor.log_health_status,
                )
            ),
            asyncio.create_task(
                _run_periodically(
                    "monitor_cleanup",
                    get_env_int("MONITOR_CLEANUP_INTERVAL_SECONDS", 3600),
                    monitor.cleanup,
                )
            ),
        ]
        try:
            yield
        finally:
            for task in tasks:
                task.cancel()
            for task in tasks:
                with suppress(asyncio.CancelledError):
                    await task
            monitor.shutdown("lifespan_exit")

    return lifespan


def create_server(context: ServerContext, telemetry: Optional[TracerProvider] = None) -> FastMCP:
    """Create the FastMCP server with every chart tool registered."""
    server = FastMCP(SERVER_NAME, lifespan=create_lifespan(context, telemetry))
    register_all(server, context)

    # FastMCP exposes http_app as a factory; wrap it to add the health route and middleware.
    from mcp_server.middleware import configure_app

    original_factory = server.http_app

    def _wrapped_factory(*args, **kwargs):
        return configure_app(original_factory(*args, **kwargs), context)

    server.http_app = _wrapped_factory
    return server


telemetry_provider = setup_telemetry()
server_context = build_server_context()
mcp = create_server(server_context, telemetry_provider)


def run() -> None:
    """Start the server on the transport named by MCP_TRANSPORT."""
    # Respect transport and host/port from environment for containerized use
    transport = get_env_choice("MCP_TRANSPORT", TRANSPORTS, "stdio")
    host = get_env_str("MCP_HOST", "0.0.0.0")
    port = get_env_int("MCP_PORT", 8000)

    if transport in ("sse", "http", "streamable-http"):
        logger.info("Starting MCP server in sse mode on %s:%s/messages", host, port)
        mcp.run(transport="sse", host=host, port=port, path="/messages")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    run()
