"""Core: config, constants, and exception handlers.

Single place for settings and shared constants.
"""

from prefixed_ids.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
