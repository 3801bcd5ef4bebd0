# ==============================================================================
# Shared Utilities for CLI Commands
# ==============================================================================
"""
Shared utilities, constants, and helper functions used across CLI command modules.

This module provides:
- ANSI color codes and status icons
- Process exit codes
- Run options set by the root callback
- Settings loading with error reporting
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import typer

from appversions.errors import ConfigError
from appversions.utils.config import DEFAULT_CONFIG_FILE, Settings, load_settings

logger = logging.getLogger(__name__)

# ==============================================================================
# Exit Codes
# ==============================================================================

EXIT_USAGE = 1
EXIT_CONFIG = 2
EXIT_CONNECTION = 3
EXIT_QUERY = 4
EXIT_LOOKUP = 10


# ==============================================================================
# ANSI Colors and Icons
# ==============================================================================


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    WHITE = "\033[37m"
    BRIGHT_GREEN = "\033[92m"


class Icons:
    """Status icons using Unicode symbols."""

    CHECK = "✓"


# Module-level aliases for convenience
C, I = Colors, Icons


# ==============================================================================
# Run Options
# ==============================================================================


@dataclass
class RunOptions:
    """Options collected by the root callback and passed to commands via ctx.obj."""

    config_file: Path = DEFAULT_CONFIG_FILE
    debug: bool = False


def get_run_options(ctx: typer.Context) -> RunOptions:
    """Get the run options for this invocation, falling back to defaults."""
    if isinstance(ctx.obj, RunOptions):
        return ctx.obj
    return RunOptions()


def load_settings_or_exit(ctx: typer.Context) -> Settings:
    """
    Load settings from the configured file.

    Raises:
        typer.Exit: With EXIT_CONFIG if the config file is unusable
    """
    options = get_run_options(ctx)
    try:
        return load_settings(options.config_file)
    except ConfigError as e:
        logger.error("%s", e)
        logger.error("Failed to process config file")
        raise typer.Exit(EXIT_CONFIG)
