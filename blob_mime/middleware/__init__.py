"""blob_mime middleware components."""

from blob_mime.middleware.base import BlobMimeMiddleware
from blob_mime.middleware.errors import ErrorHandlingMiddleware
from blob_mime.middleware.logging import LoggingMiddleware

__all__ = [
    "BlobMimeMiddleware",
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
]
