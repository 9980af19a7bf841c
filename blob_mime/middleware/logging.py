"""Request logging middleware with timing."""

import json
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

from fastmcp.server.middleware import MiddlewareContext

from blob_mime.middleware.base import BlobMimeMiddleware

# Handled by on_call_tool / on_read_resource
_DEDICATED_METHODS = frozenset({"tools/call", "resources/read"})


def summarize_result(result: Any) -> str:
    """One-line description of a handler result.

    Short single-line strings (mime and content types) are shown in
    full; bools render as JSON literals.
    """
    if result is None:
        return "null"
    if isinstance(result, bool):
        return "true" if result else "false"
    if isinstance(result, str):
        if "\n" in result or len(result) > 60:
            return f"{len(result)} chars, {result.count(chr(10)) + 1} lines"
        return repr(result)
    if isinstance(result, dict):
        return f"{len(result)} keys"
    if isinstance(result, (list, tuple)):
        return f"{len(result)} items"

    content = getattr(result, "content", None)
    if isinstance(content, (list, tuple)):
        return f"{len(content)} content item(s)"
    if content is not None:
        return "content"
    return type(result).__name__


class LoggingMiddleware(BlobMimeMiddleware):
    """Logs tool calls and resource reads with their duration.

    Calls slower than ``slow_threshold_ms`` are logged at WARNING.

    Example:
        >>> mcp.add_middleware(LoggingMiddleware(include_payloads=True))
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_payloads: bool = False,
        max_payload_length: int = 1000,
        slow_threshold_ms: float = 1000.0,
    ) -> None:
        """Initialize logging middleware.

        Args:
            logger: Optional custom logger.
            include_payloads: Log arguments and results at DEBUG.
            max_payload_length: Payload characters logged before clipping.
            slow_threshold_ms: Duration in ms at which a call counts as slow.
        """
        super().__init__(logger=logger)
        self.include_payloads = include_payloads
        self.max_payload_length = max_payload_length
        self.slow_threshold_ms = slow_threshold_ms

    def clip_payload(self, data: Any) -> str:
        """Serialize a payload for logging, clipped to max_payload_length."""
        try:
            text = json.dumps(data, default=str)
        except (TypeError, ValueError):
            text = str(data)
        if len(text) <= self.max_payload_length:
            return text
        return f"{text[: self.max_payload_length]}... [truncated]"

    def _elapsed(self, start: float) -> tuple[float, str]:
        elapsed_ms = (time.perf_counter() - start) * 1000
        label = f"{elapsed_ms:.1f}ms"
        if elapsed_ms >= self.slow_threshold_ms:
            label += " SLOW!"
        return elapsed_ms, label

    async def _timed(
        self,
        kind: str,
        target: str,
        context: MiddlewareContext,
        call_next: Callable[[MiddlewareContext], Awaitable[Any]],
    ) -> Any:
        start = time.perf_counter()
        try:
            result = await call_next(context)
        except Exception as e:
            _, label = self._elapsed(start)
            self.logger.error(
                "!!! %s: %s -> %s: %s [%s]", kind, target, type(e).__name__, e, label
            )
            raise

        elapsed_ms, label = self._elapsed(start)
        level = logging.WARNING if elapsed_ms >= self.slow_threshold_ms else logging.INFO
        self.logger.log(level, "<<< %s: %s -> %s [%s]", kind, target, summarize_result(result), label)
        if self.include_payloads and result is not None:
            self.logger.debug("    Result: %s", self.clip_payload(result))
        return result

    async def on_call_tool(self, context: MiddlewareContext, call_next: Any) -> Any:
        """Log a tool call with its arguments and result."""
        name = getattr(context.message, "name", "unknown")
        arguments = getattr(context.message, "arguments", None) or {}

        rendered = ", ".join(f"{key}={value!r}" for key, value in arguments.items())
        self.logger.info(">>> TOOL: %s(%s)", name, rendered)
        if self.include_payloads and arguments:
            self.logger.debug("    Args: %s", self.clip_payload(arguments))

        return await self._timed("TOOL", name, context, call_next)

    async def on_read_resource(self, context: MiddlewareContext, call_next: Any) -> Any:
        """Log a resource read by URI."""
        uri = str(getattr(context.message, "uri", "unknown"))
        self.logger.info(">>> RESOURCE: %s", uri)
        return await self._timed("RESOURCE", uri, context, call_next)

    async def on_message(self, context: MiddlewareContext, call_next: Any) -> Any:
        """Log other protocol messages (listings, initialize) at DEBUG."""
        if context.method in _DEDICATED_METHODS:
            return await call_next(context)

        start = time.perf_counter()
        self.logger.debug(">>> MCP: %s", context.method)
        try:
            result = await call_next(context)
        except Exception as e:
            _, label = self._elapsed(start)
            self.logger.error("!!! MCP: %s -> %s: %s [%s]", context.method, type(e).__name__, e, label)
            raise

        _, label = self._elapsed(start)
        self.logger.debug("<<< MCP: %s [%s]", context.method, label)
        return result
