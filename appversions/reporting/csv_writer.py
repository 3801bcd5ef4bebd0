# ==============================================================================
# Lookup CSV Writer
# ==============================================================================
"""
CSV output for lookup mode: one row per matching session and user.
"""

import csv
import logging
from typing import TextIO

from appversions.core.models import LookupMatch

logger = logging.getLogger(__name__)

CSV_HEADER = ["Version", "OS", "Username", "Email", "First Name", "Last Name"]


class LookupCsvWriter:
    """
    Writes lookup matches to an open text stream.

    The caller owns the stream; open it with newline="" as the csv module
    requires. The header row is written on construction.
    """

    def __init__(self, stream: TextIO):
        self._writer = csv.writer(stream)
        self.rows_written = 0
        self._writer.writerow(CSV_HEADER)

    def write(self, match: LookupMatch) -> None:
        """Write one match. A failed row is logged and skipped."""
        try:
            self._writer.writerow(match)
        except (csv.Error, OSError) as e:
            logger.warning(
                "Failed to write record to CSV! Version: %s, OS: %s, Username: %s, "
                "Email: %s, Name: %s %s (%s)",
                match.version,
                match.os,
                match.username,
                match.email,
                match.first_name,
                match.last_name,
                e,
            )
            return
        self.rows_written += 1
