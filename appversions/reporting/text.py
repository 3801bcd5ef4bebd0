# ==============================================================================
# Text Report
# ==============================================================================
"""
Plain-text rendering of tally results for standard output.
"""

import re

from appversions.core.aggregator import count_clients
from appversions.core.models import AggregateCounts


_TOKEN = re.compile(r"[0-9]+|[^0-9]+")


def _version_key(version: str) -> list[tuple[int, int, str]]:
    """Sort key comparing digit runs numerically, so 5.9.0 precedes 5.10.0."""
    return [
        (0, int(token), "") if token[0].isdigit() else (1, 0, token)
        for token in _TOKEN.findall(version)
    ]


def _version_lines(counts: AggregateCounts) -> list[str]:
    lines = []
    for version in sorted(counts, key=_version_key):
        for info in sorted(counts[version]):
            lines.append(f"  {version} ({info.os}) - {info.count}")
    return lines


def render_report(desktop: AggregateCounts, mobile: AggregateCounts) -> str:
    """
    Render desktop and mobile counts as the text report.

    Each class gets a section listing "version (OS) - count" lines and a
    subtotal, or a "none found" line when empty. A grand total follows.
    When both classes are empty only "No Mattermost Apps Found" is shown.

    Returns:
        Report text without a trailing newline
    """
    if not desktop and not mobile:
        return "No Mattermost Apps Found"

    total_desktop = count_clients(desktop)
    total_mobile = count_clients(mobile)
    lines: list[str] = []

    if desktop:
        lines.append("Mattermost Desktop App Versions Found:")
        lines.extend(_version_lines(desktop))
        lines.append("")
        lines.append(f"Total Active Desktop Clients: {total_desktop}")
    else:
        lines.append("No Mattermost Desktop Apps Found")

    if mobile:
        lines.append("")
        lines.append("Mattermost Mobile App Versions Found:")
        lines.extend(_version_lines(mobile))
        lines.append("")
        lines.append(f"Total Active Mobile Clients: {total_mobile}")
    else:
        lines.append("No Mattermost Mobile Apps Found")

    lines.append("")
    lines.append(f"Total Active Clients: {total_desktop + total_mobile}")
    return "\n".join(lines)
