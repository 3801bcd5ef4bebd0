# ==============================================================================
# Version Aggregator
# ==============================================================================
"""
Collect-then-consolidate counting of (version, OS) events.

Events are first recorded as unit entries per version. consolidate() then sums
entries sharing the same (version, OS) pair, so the final totals do not depend
on the order rows arrived in.
"""

from collections import Counter, defaultdict

from appversions.core.models import AggregateCounts, VersionInfo


class VersionAggregator:
    """
    Per-run accumulator for one client class.

    Example:
        >>> agg = VersionAggregator()
        >>> agg.add("5.5.0", "Windows")
        >>> agg.add("5.5.0", "Windows")
        >>> agg.consolidate()
        {'5.5.0': [VersionInfo(os='Windows', count=2)]}
    """

    def __init__(self):
        self._events: defaultdict[str, list[VersionInfo]] = defaultdict(list)

    def add(self, version: str, os: str) -> None:
        """Record one session seen at this version on this OS."""
        self._events[version].append(VersionInfo(os=os, count=1))

    @property
    def total(self) -> int:
        """Number of events recorded so far."""
        return sum(len(infos) for infos in self._events.values())

    def __len__(self) -> int:
        return len(self._events)

    def consolidate(self) -> AggregateCounts:
        """
        Sum recorded events into one VersionInfo per (version, OS).

        Returns:
            Mapping of version to per-OS totals, OS entries sorted by name
        """
        result: AggregateCounts = {}
        for version, infos in self._events.items():
            os_counts: Counter[str] = Counter()
            for info in infos:
                os_counts[info.os] += info.count
            result[version] = [
                VersionInfo(os=os, count=count) for os, count in sorted(os_counts.items())
            ]
        return result


def count_clients(counts: AggregateCounts) -> int:
    """Total number of clients across all versions and operating systems."""
    return sum(info.count for infos in counts.values() for info in infos)
