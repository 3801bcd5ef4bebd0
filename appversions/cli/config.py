# ==============================================================================
# Config Commands
# ==============================================================================
"""
Configuration commands for the app versions CLI.
"""

import json
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from appversions.cli.shared import load_settings_or_exit
from appversions.utils.config import DatabaseType


# ==============================================================================
# Commands
# ==============================================================================


def config_show(
    ctx: typer.Context,
    json_output: Annotated[
        bool, typer.Option("--json", "-j", help="Output configuration as JSON")
    ] = False,
) -> None:
    """Display the effective database configuration (password masked)."""
    settings = load_settings_or_exit(ctx)
    db = settings.db

    values = {
        "config_file": str(settings.config_file),
        "type": db.type.value,
        "host": db.host,
        "port": db.resolved_port,
        "name": db.name,
        "user": db.user,
        "password": db.masked_password,
    }
    if db.type is DatabaseType.POSTGRESQL:
        values["sslmode"] = db.sslmode
    values["connect_timeout"] = db.connect_timeout

    if json_output:
        print(json.dumps(values, indent=2))
        return

    console = Console()
    table = Table(title="Configuration", title_justify="left", show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in values.items():
        table.add_row(key, str(value))
    console.print(table)
