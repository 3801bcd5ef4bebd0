# ==============================================================================
# Version Utilities
# ==============================================================================
"""
Utilities for retrieving the package version.
"""

from importlib.metadata import PackageNotFoundError, version


def get_app_version() -> str:
    """
    Get the app-versions package version.

    Returns:
        Version string (e.g., "0.1.0"), or "development" when not installed
    """
    try:
        return version("app-versions")
    except PackageNotFoundError:
        return "development"
