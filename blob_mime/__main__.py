"""Entry point for the blob_mime server."""

import logging

from blob_mime.config import Settings
from blob_mime.server import mcp  # This import also configures logging
from blob_mime.services.state import get_dependencies

logger = logging.getLogger(__name__)


def run_server() -> None:
    """Build the registry and run the MCP server with configured transport."""
    settings = Settings.from_env()

    # Fail fast on bad override tables before binding a transport
    get_dependencies()

    if settings.transport == "stdio":
        logger.info("Starting blob_mime server (transport=stdio)")
        mcp.run(transport="stdio")
    else:
        logger.info(
            "Starting blob_mime server (transport=http, host=%s, port=%d)",
            settings.http_host,
            settings.http_port,
        )
        mcp.run(
            transport="http",
            host=settings.http_host,
            port=settings.http_port,
        )


if __name__ == "__main__":
    run_server()
