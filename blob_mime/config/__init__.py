"""Configuration module for blob_mime.

Provides focused classes for different configuration concerns:
- Config: Main configuration class (aggregates all components)
- OverrideLoader: Reads the mime and content-type override tables
- Settings: Environment variable configuration
"""

from blob_mime.config.loader import OverrideLoader
from blob_mime.config.main import Config
from blob_mime.config.settings import Settings

__all__ = ["Config", "OverrideLoader", "Settings"]
