"""Mime registry: base database and override merging."""

from blob_mime.registry.base import MimetypesRegistry, default_encoding
from blob_mime.registry.merge import MimeRegistry, RegistryBuilder, build_registry

__all__ = [
    "MimeRegistry",
    "MimetypesRegistry",
    "RegistryBuilder",
    "build_registry",
    "default_encoding",
]
