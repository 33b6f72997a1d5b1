"""Core: config, logging, lifespan and exception handlers.

Single place for settings and application bootstrap.
"""

from todai.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
