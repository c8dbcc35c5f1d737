"""Core: config, exception handlers, and application lifespan.

Single place for settings and startup/shutdown wiring.
"""

from task_api.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
