"""Configuration module for the Titanic harness.

Usage:
    from titanic_harness.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.base_url)

Note:
    No module-level `settings` instance is exported; use `get_settings()`
    so that environment overrides applied by tests are picked up.
"""

from titanic_harness.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
