"""FastMCP server exposing the mime lookups.

Tools and resources are thin wrappers; resolution lives in
``blob_mime.registry`` and ``blob_mime.services``.
"""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from blob_mime.config import Settings
from blob_mime.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from blob_mime.resources import extension_resource, list_overrides_resource
from blob_mime.services.state import get_dependencies
from blob_mime.tools import classify, content_type_for, is_attachment, is_binary, mime_for
from blob_mime.utils.console import RequestFormatter

TOOLS = (mime_for, content_type_for, is_binary, is_attachment, classify)

RESOURCES = (
    ("mime://{extension}", extension_resource),
    ("overrides://list", list_overrides_resource),
)

# Capped at WARNING so request logs stay readable
QUIET_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error", "httpx", "httpcore", "fastmcp", "starlette", "anyio")


def _configure_logging(settings: Settings | None = None) -> None:
    """Attach the colored stderr handler to the ``blob_mime`` logger.

    Runs on import so the handler is in place however the server is
    launched. Colors are only used on a TTY.

    Args:
        settings: Level and color options; read from the environment when omitted.
    """
    settings = settings or Settings.from_env()

    root = logging.getLogger("blob_mime")
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(RequestFormatter(use_colors=settings.log_colors and sys.stderr.isatty()))
        root.addHandler(handler)
        root.propagate = False

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


_configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Build the registry before serving.

    A broken override table raises here, so the server never starts
    half-configured.

    Yields:
        Registry sizes: ``types`` and ``extensions``
    """
    logger.info("blob_mime server starting up")
    deps = get_dependencies()
    stats = {
        "types": len(deps.registry),
        "extensions": len(deps.registry.extension_index),
    }
    logger.info(
        "Registry ready: %d types, %d extensions, %d content-type substitution(s)",
        stats["types"],
        stats["extensions"],
        len(deps.content_types),
    )
    try:
        yield stats
    finally:
        logger.info("blob_mime server shutting down")


def configure_middleware(server: FastMCP, settings: Settings | None = None) -> None:
    """Install error handling (inner) and request logging (outer).

    Args:
        server: Server to install middleware on.
        settings: Logging options; read from the environment when omitted.
    """
    settings = settings or Settings.from_env()
    server.add_middleware(ErrorHandlingMiddleware(include_traceback=settings.include_traceback))
    server.add_middleware(
        LoggingMiddleware(
            include_payloads=settings.log_payloads,
            slow_threshold_ms=float(settings.slow_threshold_ms),
        )
    )


async def health_check(request: Request) -> PlainTextResponse:
    """Liveness probe for the HTTP transport."""
    logger.debug("Health check from %s", request.client.host if request.client else "unknown")
    return PlainTextResponse("OK")


def create_server(settings: Settings | None = None) -> FastMCP:
    """Build the FastMCP server with middleware, tools, resources and /health."""
    server = FastMCP("blob_mime", lifespan=app_lifespan)
    configure_middleware(server, settings)

    for tool in TOOLS:
        server.tool()(tool)
    for uri, handler in RESOURCES:
        server.resource(uri, mime_type="text/plain")(handler)
    server.custom_route("/health", methods=["GET"])(health_check)

    return server


mcp = create_server()
