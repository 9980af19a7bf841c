"""Error logging middleware."""

import logging
import traceback
from collections import Counter
from collections.abc import Callable
from typing import Any

from fastmcp.server.middleware import MiddlewareContext

from blob_mime.middleware.base import BlobMimeMiddleware

ErrorCallback = Callable[[Exception, MiddlewareContext], None]


class ErrorHandlingMiddleware(BlobMimeMiddleware):
    """Logs and counts exceptions raised by handlers, then re-raises them.

    Lookups degrade to fallbacks instead of raising, so what shows up
    here is bad tool arguments or an override table that failed to load
    on first use.

    Example:
        >>> mcp.add_middleware(ErrorHandlingMiddleware(include_traceback=True))
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_traceback: bool = False,
        error_callback: ErrorCallback | None = None,
    ) -> None:
        """Initialize error handling middleware.

        Args:
            logger: Optional custom logger.
            include_traceback: Append the formatted traceback to error logs.
            error_callback: Called with (exception, context) for each error.
        """
        super().__init__(logger=logger)
        self.include_traceback = include_traceback
        self.error_callback = error_callback
        self._counts: Counter[str] = Counter()

    def get_error_stats(self) -> dict[str, int]:
        """Error counts keyed by exception class name."""
        return dict(self._counts)

    def reset_stats(self) -> None:
        self._counts.clear()

    def _report(self, error: Exception, context: MiddlewareContext) -> None:
        name = type(error).__name__
        self._counts[name] += 1

        message = f"Error in {context.method}: {name}: {error}"
        if self.include_traceback:
            message = f"{message}\n{traceback.format_exc()}"
        self.logger.error(message)

        if self.error_callback is None:
            return
        try:
            self.error_callback(error, context)
        except Exception as callback_error:
            self.logger.warning("Error callback failed: %s", callback_error)

    async def on_message(self, context: MiddlewareContext, call_next: Any) -> Any:
        """Pass the message on; log, count and re-raise any failure."""
        try:
            return await call_next(context)
        except Exception as e:
            self._report(e, context)
            raise
