"""MCP Server Middleware Configuration.

Middleware added on HTTP transports:
- CORS for browser-based MCP clients
- Request id propagation from the X-Request-ID header
- OpenTelemetry instrumentation
"""

import logging
from typing import Callable, List

from opentelemetry import trace
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from common.config.env import get_env_list
from common.observability.context import request_id_var
from mcp_server.health import health_payload
from mcp_server.utils.context import ServerContext

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Propagate the X-Request-ID header to the request context and span."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID")
        token = None
        if request_id:
            token = request_id_var.set(request_id)
            span = trace.get_current_span()
            if span.is_recording():
                span.set_attribute("mcp.request_id", request_id)
        try:
            return await call_next(request)
        finally:
            if token:
                request_id_var.reset(token)


def get_middleware_stack() -> List[Middleware]:
    """Build the middleware stack for the MCP server.

    Returns:
        List of Starlette Middleware instances in application order.
    """
    return [
        Middleware(
            CORSMiddleware,
            allow_origins=get_env_list("MCP_CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
            allow_methods=["*"],
            allow_headers=["*"],
        ),
        Middleware(RequestIdMiddleware),
    ]


def instrument_app(app: Starlette) -> None:
    """Apply OpenTelemetry instrumentation to the Starlette app."""
    try:
        from opentelemetry.instrumentation.starlette import StarletteInstrumentor

        StarletteInstrumentor().instrument_app(app)
        logger.info("OTEL instrumentation applied to MCP server")
    except ImportError:
        logger.warning("OpenTelemetry instrumentation not available")


def create_health_route(context: ServerContext) -> Route:
    """Create the /health endpoint route for ``context``."""

    async def health_handler(request: Request) -> JSONResponse:
        """Health/readiness endpoint reflecting initialization and monitor status."""
        payload, http_status = health_payload(context)
        return JSONResponse(payload, status_code=http_status)

    return Route("/health", health_handler, methods=["GET"])


def configure_app(app: Starlette, context: ServerContext) -> Starlette:
    """Add the health route, middleware and instrumentation to a FastMCP HTTP app."""
    app.routes.insert(0, create_health_route(context))
    for middleware in reversed(get_middleware_stack()):
        app.add_middleware(middleware.cls, *middleware.args, **middleware.kwargs)
    instrument_app(app)
    logger.info("MCP app configured with middleware and health endpoint")
    return app
