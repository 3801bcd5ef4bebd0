# ==============================================================================
# Version Comparison
# ==============================================================================
"""
Strict major.minor.patch parsing used by lookup mode.

The base tally treats versions as opaque labels; only lookup needs to order
them.
"""

import re

from appversions.errors import VersionFormatError

# Optionally signed run of ASCII digits
_COMPONENT = re.compile(r"[+-]?[0-9]+")


def split_version(version: str) -> tuple[int, int, int]:
    """
    Split a version into integer components.

    Args:
        version: Version string such as "5.5.3"

    Returns:
        (major, minor, patch)

    Raises:
        VersionFormatError: If there are not exactly three integer components
    """
    parts = version.split(".")
    if len(parts) != 3:
        raise VersionFormatError(f"invalid version format: {version!r}")

    if not all(_COMPONENT.fullmatch(part) for part in parts):
        raise VersionFormatError(f"invalid version format: {version!r}")

    major, minor, patch = (int(part) for part in parts)
    return major, minor, patch


def is_older_or_equal(version: str, lookup_version: str) -> bool:
    """
    Check whether version <= lookup_version.

    Compares major, then minor, then patch.

    Raises:
        VersionFormatError: If either version is malformed
    """
    return split_version(version) <= split_version(lookup_version)
