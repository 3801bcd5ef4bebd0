# ==============================================================================
# CLI Commands Module
# ==============================================================================
"""
CLI commands for the app versions utility.

Commands are organized into separate modules for maintainability:
- shared.py: Common utilities, constants, and helpers
- report.py: Version tally printed to stdout
- lookup.py: Desktop users at or below a version, written to CSV
- config.py: Configuration display
"""

from appversions.cli.shared import (
    # Constants
    EXIT_CONFIG,
    EXIT_CONNECTION,
    EXIT_LOOKUP,
    EXIT_QUERY,
    EXIT_USAGE,
    # Classes
    Colors,
    Icons,
    RunOptions,
    # Aliases
    C,
    I,
    # Helpers
    get_run_options,
    load_settings_or_exit,
)

__all__ = [
    # Constants
    "EXIT_CONFIG",
    "EXIT_CONNECTION",
    "EXIT_LOOKUP",
    "EXIT_QUERY",
    "EXIT_USAGE",
    # Classes
    "Colors",
    "Icons",
    "RunOptions",
    # Aliases
    "C",
    "I",
    # Helpers
    "get_run_options",
    "load_settings_or_exit",
]
