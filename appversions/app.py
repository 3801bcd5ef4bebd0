# ==============================================================================
# App Versions CLI
# ==============================================================================
"""
Command-line interface for the Mattermost app versions utility.

Usage:
    app-versions --help
    app-versions --version
    app-versions report
    app-versions --config prod.json --debug report
    app-versions lookup --ver 5.5.3 --outfile users.csv
    app-versions config show
"""

import logging
import os
from pathlib import Path
from typing import Annotated, Optional

import typer

from appversions.cli.shared import RunOptions
from appversions.utils.config import DEFAULT_CONFIG_FILE
from appversions.utils.logging import configure_logging
from appversions.utils.versions import get_app_version

logger = logging.getLogger(__name__)

# ==============================================================================
# App Configuration
# ==============================================================================
# Set consistent terminal width for help output formatting
if "COLUMNS" not in os.environ:
    os.environ["COLUMNS"] = "115"

app = typer.Typer(
    name="app-versions",
    help="Report Mattermost desktop and mobile app versions from active sessions",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        print(f"Version: {get_app_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    config_file: Annotated[
        Path,
        typer.Option("--config", "-c", help="Path to config file"),
    ] = DEFAULT_CONFIG_FILE,
    debug: Annotated[
        bool,
        typer.Option("--debug", "-d", help="Run in debug mode for additional output"),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            help="Show version information and exit",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Report Mattermost desktop and mobile app versions from active sessions."""
    configure_logging(debug)
    ctx.obj = RunOptions(config_file=config_file, debug=debug)
    logger.debug("Using config file: %s", config_file)


# Report command is imported from appversions.cli.report
from appversions.cli.report import show_report

app.command("report")(show_report)

# Lookup command is imported from appversions.cli.lookup
from appversions.cli.lookup import lookup_users

app.command("lookup")(lookup_users)

config_app = typer.Typer(
    help="Configuration management",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

from appversions.cli.config import config_show

config_app.command("show")(config_show)


# ==============================================================================
# Entry Point
# ==============================================================================


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
