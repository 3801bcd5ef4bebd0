# ==============================================================================
# Reporting
# ==============================================================================
"""
Output formats for scan results.

- text.py: Human-readable tally for standard output
- csv_writer.py: Lookup matches as CSV
"""

from appversions.reporting.csv_writer import CSV_HEADER, LookupCsvWriter
from appversions.reporting.text import render_report

__all__ = [
    "CSV_HEADER",
    "LookupCsvWriter",
    "render_report",
]
