# ==============================================================================
# Session Scanner
# ==============================================================================
"""
Single-pass scan over active sessions.

One pipeline serves both run modes:
- tally(): classify every session and count desktop/mobile versions by OS
- lookup(): find desktop sessions at or below a version and join their users

Each row is decoded, classified and its version extracted with the pure
functions in core/classifier.py. Decode failures skip the row with a warning;
query failures propagate and end the run.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from appversions.core.aggregator import VersionAggregator, count_clients
from appversions.core.classifier import classify, decode_properties, extract_version
from appversions.core.models import (
    PLACEHOLDER_VERSION,
    AggregateCounts,
    ClientClass,
    LookupMatch,
    SessionProperties,
    SessionRow,
)
from appversions.core.versions import is_older_or_equal, split_version
from appversions.errors import DecodeError, VersionFormatError

if TYPE_CHECKING:
    from appversions.base.repositories import SessionRepository

logger = logging.getLogger(__name__)


class MatchSink(Protocol):
    """Destination for lookup matches (e.g. a CSV writer)."""

    def write(self, match: LookupMatch) -> None: ...


@dataclass
class TallyResult:
    """Consolidated counts for one tally run."""

    desktop: AggregateCounts = field(default_factory=dict)
    mobile: AggregateCounts = field(default_factory=dict)
    rows_scanned: int = 0
    rows_skipped: int = 0

    @property
    def total_desktop(self) -> int:
        return count_clients(self.desktop)

    @property
    def total_mobile(self) -> int:
        return count_clients(self.mobile)

    @property
    def total(self) -> int:
        return self.total_desktop + self.total_mobile


@dataclass
class LookupResult:
    """Summary of one lookup run."""

    sessions_matched: int = 0
    rows_scanned: int = 0
    rows_skipped: int = 0


def _decode_row(row: SessionRow) -> SessionProperties | None:
    """Decode a row's properties, or log and return None."""
    try:
        return decode_properties(row.props, row.device_id)
    except DecodeError as e:
        logger.warning("%s", e)
        return None


class SessionScanner:
    """
    Runs the classification pipeline over a repository's active sessions.

    The scanner owns no state between runs: every call builds fresh
    aggregators and returns them.
    """

    def __init__(self, repository: "SessionRepository"):
        self._repository = repository

    def tally(self, now_ms: int | None = None) -> TallyResult:
        """
        Count active desktop and mobile clients by version and OS.

        Desktop sessions reporting version "0.0" are skipped. Mobile sessions
        reporting "0.0" are still counted but logged as a warning.

        Raises:
            QueryError: If the session query fails
        """
        return tally_rows(self._repository.iter_active_sessions(now_ms))

    def lookup(
        self,
        lookup_version: str,
        sink: MatchSink,
        now_ms: int | None = None,
    ) -> LookupResult:
        """
        Write users whose desktop client is at or below lookup_version.

        Mobile sessions are ignored. A session whose version cannot be parsed
        is included rather than dropped.

        Args:
            lookup_version: Threshold version, major.minor.patch
            sink: Receives one LookupMatch per (session, user) pair
            now_ms: Reference time for session expiry

        Raises:
            VersionFormatError: If lookup_version is malformed
            QueryError: If the session or user query fails
        """
        split_version(lookup_version)

        result = LookupResult()
        for row in self._repository.iter_active_sessions(now_ms):
            result.rows_scanned += 1
            props = _decode_row(row)
            if props is None:
                result.rows_skipped += 1
                continue

            version = _lookup_candidate_version(props, row, lookup_version)
            if version is None:
                continue

            result.sessions_matched += 1
            if not row.user_id:
                logger.debug("Matching session has no user id. Skipping user lookup.")
                continue
            for user in self._repository.get_user(row.user_id):
                sink.write(LookupMatch.from_user(version, props.os, user))

        logger.info(
            "Lookup complete: %d sessions scanned, %d matched",
            result.rows_scanned,
            result.sessions_matched,
        )
        return result


def tally_rows(rows: Iterable[SessionRow]) -> TallyResult:
    """
    Classify and count a stream of session rows.

    Args:
        rows: Active session rows

    Returns:
        TallyResult with consolidated desktop and mobile counts
    """
    desktop = VersionAggregator()
    mobile = VersionAggregator()
    result = TallyResult()

    for row in rows:
        result.rows_scanned += 1
        props = _decode_row(row)
        if props is None:
            result.rows_skipped += 1
            continue

        client_class = classify(props)
        version = extract_version(props, client_class)
        if version is None:
            continue

        if client_class is ClientClass.MOBILE:
            if version == PLACEHOLDER_VERSION:
                logger.warning(
                    "Unrecognised entry - Device ID: %s, JSON Session: %s",
                    row.device_id,
                    row.props,
                )
            mobile.add(version, props.os)
        elif client_class is ClientClass.DESKTOP:
            if version == PLACEHOLDER_VERSION:
                logger.debug("Troubleshooting: %s", row.props)
                continue
            desktop.add(version, props.os)

    result.desktop = desktop.consolidate()
    result.mobile = mobile.consolidate()
    logger.debug(
        "Tally complete: %d rows scanned, %d skipped, %d desktop, %d mobile",
        result.rows_scanned,
        result.rows_skipped,
        result.total_desktop,
        result.total_mobile,
    )
    return result


def _lookup_candidate_version(
    props: SessionProperties, row: SessionRow, lookup_version: str
) -> str | None:
    """Return the desktop version if this session should be reported."""
    client_class = classify(props)
    if client_class is ClientClass.MOBILE:
        logger.debug("Mobile device. Skipping for lookup.")
        return None
    if client_class is not ClientClass.DESKTOP:
        return None

    version = extract_version(props, client_class)
    if version is None:
        return None
    if version == PLACEHOLDER_VERSION:
        logger.debug("Troubleshooting: %s", row.props)
        return None

    try:
        included = is_older_or_equal(version, lookup_version)
    except VersionFormatError:
        logger.warning("Unable to parse version string: %s", version)
        included = True

    return version if included else None
