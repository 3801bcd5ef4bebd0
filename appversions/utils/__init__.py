# ==============================================================================
# App Versions Utilities
# ==============================================================================
"""
Shared utilities: configuration, logging setup and package version.
"""

from appversions.utils.config import (
    DatabaseSettings,
    DatabaseType,
    Settings,
    load_settings,
)
from appversions.utils.logging import configure_logging
from appversions.utils.versions import get_app_version

__all__ = [
    # Config
    "DatabaseSettings",
    "DatabaseType",
    "Settings",
    "load_settings",
    # Logging
    "configure_logging",
    # Version
    "get_app_version",
]
