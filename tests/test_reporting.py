# ==============================================================================
# Tests for Report Rendering
# ==============================================================================
"""
Unit tests for render_report() and LookupCsvWriter.

Tests cover:
- Section headers, entry lines, subtotals and grand total
- "None found" lines for an empty class
- The single "no apps" message when both classes are empty
- CSV header and rows for lookup output
"""

import csv
import io

from appversions.core.models import LookupMatch, VersionInfo
from appversions.reporting.csv_writer import CSV_HEADER, LookupCsvWriter
from appversions.reporting.text import render_report

DESKTOP = {"5.5.0": [VersionInfo("Windows", 2)]}
MOBILE = {"5.5.3": [VersionInfo("Mac OS", 1)]}


# ==============================================================================
# render_report
# ==============================================================================


class TestRenderReport:
    """Tests for the text report."""

    def test_full_report(self):
        assert render_report(DESKTOP, MOBILE).splitlines() == [
            "Mattermost Desktop App Versions Found:",
            "  5.5.0 (Windows) - 2",
            "",
            "Total Active Desktop Clients: 2",
            "",
            "Mattermost Mobile App Versions Found:",
            "  5.5.3 (Mac OS) - 1",
            "",
            "Total Active Mobile Clients: 1",
            "",
            "Total Active Clients: 3",
        ]

    def test_no_apps(self):
        assert render_report({}, {}) == "No Mattermost Apps Found"

    def test_no_desktop_apps(self):
        output = render_report({}, MOBILE)
        assert output.startswith("No Mattermost Desktop Apps Found\n")
        assert "Total Active Mobile Clients: 1" in output
        assert "Total Active Desktop Clients" not in output
        assert output.endswith("Total Active Clients: 1")

    def test_no_mobile_apps(self):
        output = render_report(DESKTOP, {})
        assert "No Mattermost Mobile Apps Found" in output
        assert "Mattermost Mobile App Versions Found:" not in output
        assert output.endswith("Total Active Clients: 2")

    def test_entries_are_sorted(self):
        desktop = {
            "5.6.0": [VersionInfo("Windows", 1)],
            "5.5.0": [VersionInfo("Windows", 4), VersionInfo("Linux", 3)],
        }
        lines = render_report(desktop, {}).splitlines()
        assert lines[1:4] == [
            "  5.5.0 (Linux) - 3",
            "  5.5.0 (Windows) - 4",
            "  5.6.0 (Windows) - 1",
        ]
        assert "Total Active Desktop Clients: 8" in lines

    def test_versions_sort_numerically(self):
        desktop = {v: [VersionInfo("Linux", 1)] for v in ["5.10.0", "5.9.0", "10.0.0", "5.9.0-rc"]}
        lines = render_report(desktop, {}).splitlines()
        assert [line.split()[0] for line in lines[1:5]] == ["5.9.0", "5.9.0-rc", "5.10.0", "10.0.0"]


# ==============================================================================
# LookupCsvWriter
# ==============================================================================


class TestLookupCsvWriter:
    """Tests for CSV output."""

    def test_header_written_on_creation(self):
        stream = io.StringIO()
        LookupCsvWriter(stream)
        assert next(csv.reader(io.StringIO(stream.getvalue()))) == CSV_HEADER
        assert CSV_HEADER == ["Version", "OS", "Username", "Email", "First Name", "Last Name"]

    def test_rows(self):
        stream = io.StringIO()
        writer = LookupCsvWriter(stream)
        writer.write(LookupMatch("5.5.0", "Windows", "alice", "a@example.com", "Alice", "Anders"))
        writer.write(LookupMatch("5.4.0", "Mac OS", "bob", "b@example.com", "Bob", "Brown, Jr."))

        rows = list(csv.reader(io.StringIO(stream.getvalue())))
        assert rows[1] == ["5.5.0", "Windows", "alice", "a@example.com", "Alice", "Anders"]
        assert rows[2] == ["5.4.0", "Mac OS", "bob", "b@example.com", "Bob", "Brown, Jr."]
        assert writer.rows_written == 2

    def test_failed_row_is_not_counted(self):
        class BrokenStream(io.StringIO):
            broken = False

            def write(self, s):
                if self.broken:
                    raise OSError("disk full")
                return super().write(s)

        stream = BrokenStream()
        writer = LookupCsvWriter(stream)
        stream.broken = True
        writer.write(LookupMatch("5.5.0", "Windows", "alice", "a@example.com", "Alice", "Anders"))
        assert writer.rows_written == 0
