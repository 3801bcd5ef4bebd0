# ==============================================================================
# Core Domain Logic
# ==============================================================================
"""
Pure domain logic with no database or CLI dependencies.

This module contains:
- Domain models (SessionProperties, ClientClass, VersionInfo, LookupMatch)
- Classification and version extraction
- Version aggregation and comparison
- The scan pipeline tying them together

All code here is easily unit-testable with in-memory rows.
"""

from appversions.core.aggregator import VersionAggregator, count_clients
from appversions.core.classifier import classify, decode_properties, extract_version
from appversions.core.models import (
    AggregateCounts,
    ClientClass,
    LookupMatch,
    SessionProperties,
    SessionRow,
    UserRecord,
    VersionInfo,
)
from appversions.core.scanner import LookupResult, SessionScanner, TallyResult, tally_rows
from appversions.core.versions import is_older_or_equal, split_version

__all__ = [
    "AggregateCounts",
    "ClientClass",
    "LookupMatch",
    "LookupResult",
    "SessionProperties",
    "SessionRow",
    "SessionScanner",
    "TallyResult",
    "UserRecord",
    "VersionAggregator",
    "VersionInfo",
    "classify",
    "count_clients",
    "decode_properties",
    "extract_version",
    "is_older_or_equal",
    "split_version",
    "tally_rows",
]
