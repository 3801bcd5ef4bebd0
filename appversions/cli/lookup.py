# ==============================================================================
# Lookup Command
# ==============================================================================
"""
Lookup command for the app versions CLI.

Finds users with an active desktop app session at or below a given version
and writes them to a CSV file.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from appversions.cli.shared import (
    EXIT_CONNECTION,
    EXIT_LOOKUP,
    EXIT_USAGE,
    C,
    I,
    load_settings_or_exit,
)
from appversions.core.scanner import SessionScanner
from appversions.core.versions import split_version
from appversions.errors import DatabaseConnectionError, QueryError, VersionFormatError
from appversions.infrastructure.repositories import get_session_repository
from appversions.reporting.csv_writer import LookupCsvWriter

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_FILE = Path("users.csv")


# ==============================================================================
# Commands
# ==============================================================================


def lookup_users(
    ctx: typer.Context,
    version: Annotated[
        Optional[str],
        typer.Option(
            "--ver",
            help="[required] Users with desktop clients of this version and older are returned",
        ),
    ] = None,
    outfile: Annotated[
        Path,
        typer.Option("--outfile", "-o", help="Output CSV filename"),
    ] = DEFAULT_OUTPUT_FILE,
) -> None:
    """Look up desktop users at or below a version.

    Writes one CSV row per matching session with the columns
    Version, OS, Username, Email, First Name, Last Name. Sessions whose
    version cannot be parsed are included so they can be checked by hand.

    Examples:
        app-versions lookup --ver 5.5.3
        app-versions lookup --ver 5.5.3 --outfile old-clients.csv
    """
    if not version:
        logger.error("A desktop client version is required for lookup mode")
        print(ctx.get_help())
        raise typer.Exit(EXIT_USAGE)

    try:
        split_version(version)
    except VersionFormatError as e:
        logger.error("%s", e)
        raise typer.Exit(EXIT_USAGE)

    logger.info(
        "Running in lookup mode, for desktop version v%s and earlier. Writing results to: %s",
        version,
        outfile,
    )

    settings = load_settings_or_exit(ctx)
    repository = get_session_repository(settings.db)

    try:
        with repository, open(outfile, "w", newline="") as stream:
            writer = LookupCsvWriter(stream)
            result = SessionScanner(repository).lookup(version, writer)
    except DatabaseConnectionError as e:
        logger.error("%s", e)
        logger.error("Failed to connect to database")
        raise typer.Exit(EXIT_CONNECTION)
    except OSError as e:
        logger.error("Failed to create CSV file: %s", e)
        logger.error("Error processing lookup")
        raise typer.Exit(EXIT_LOOKUP)
    except QueryError as e:
        logger.error("%s", e)
        logger.error("Error processing lookup")
        raise typer.Exit(EXIT_LOOKUP)

    print(
        f"{C.BRIGHT_GREEN}{I.CHECK} Wrote {C.WHITE}{writer.rows_written}{C.RESET}"
        f"{C.BRIGHT_GREEN} users ({result.sessions_matched} matching sessions) "
        f"to {outfile}{C.RESET}"
    )
