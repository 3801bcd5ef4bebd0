# ==============================================================================
# Report Command
# ==============================================================================
"""
Report command for the app versions CLI.

Tallies active desktop and mobile app sessions by version and OS and prints
the result to standard output.
"""

import json
import logging
from typing import Annotated

import typer

from appversions.cli.shared import EXIT_CONNECTION, EXIT_QUERY, load_settings_or_exit
from appversions.core.scanner import SessionScanner
from appversions.errors import DatabaseConnectionError, QueryError
from appversions.infrastructure.repositories import get_session_repository
from appversions.reporting.text import render_report

logger = logging.getLogger(__name__)


# ==============================================================================
# Commands
# ==============================================================================


def show_report(
    ctx: typer.Context,
    json_output: Annotated[
        bool, typer.Option("--json", "-j", help="Output as JSON for scripting")
    ] = False,
) -> None:
    """Count active Mattermost app sessions by version and OS.

    Desktop sessions are recognised by the "Desktop App" marker in the
    browser field. Mobile sessions are recognised by the mobile flag, a
    device ID, or an Android/iOS operating system.

    Examples:
        app-versions report          # Text report
        app-versions report --json   # JSON output for scripting
    """
    settings = load_settings_or_exit(ctx)
    repository = get_session_repository(settings.db)

    try:
        with repository:
            result = SessionScanner(repository).tally()
    except DatabaseConnectionError as e:
        logger.error("%s", e)
        logger.error("Failed to connect to database")
        raise typer.Exit(EXIT_CONNECTION)
    except QueryError as e:
        logger.error("%s", e)
        logger.error("Error processing database")
        raise typer.Exit(EXIT_QUERY)

    if result.rows_skipped:
        logger.info("Skipped %d sessions with unreadable properties", result.rows_skipped)

    if json_output:
        payload = {
            "desktop": {v: dict(infos) for v, infos in result.desktop.items()},
            "mobile": {v: dict(infos) for v, infos in result.mobile.items()},
            "total_desktop": result.total_desktop,
            "total_mobile": result.total_mobile,
            "total": result.total,
        }
        print(json.dumps(payload, indent=2, sort_keys=True))
        return

    print(render_report(result.desktop, result.mobile))
