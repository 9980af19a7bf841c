"""Resolution services for blob_mime.

Global state lives in :mod:`blob_mime.services.state`, which is not
imported here so that :mod:`blob_mime.dependencies` can import the
resolvers without a cycle.
"""

from blob_mime.services.classifier import UNKNOWN_CONTENT_TYPE, Classifier
from blob_mime.services.content_type import ContentTypeResolver, with_charset
from blob_mime.services.resolver import DEFAULT_MIME_TYPE, Resolver

__all__ = [
    "Classifier",
    "ContentTypeResolver",
    "DEFAULT_MIME_TYPE",
    "Resolver",
    "UNKNOWN_CONTENT_TYPE",
    "with_charset",
]
