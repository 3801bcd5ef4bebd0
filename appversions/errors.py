# ==============================================================================
# Exceptions
# ==============================================================================
"""
Exception hierarchy for the app versions utility.

Fatal errors (ConfigError, DatabaseConnectionError, QueryError) end the run
with a dedicated exit code. Recoverable errors (DecodeError, VersionFormatError)
are handled per row by the scanner.
"""


class AppVersionsError(Exception):
    """Base class for all app versions errors."""


class ConfigError(AppVersionsError):
    """Config file is missing, malformed, or names an unsupported database."""


class DatabaseConnectionError(AppVersionsError):
    """The database driver failed to open a connection."""


class QueryError(AppVersionsError):
    """A query failed to execute or its rows could not be read."""


class DecodeError(AppVersionsError):
    """A session's JSON property blob could not be decoded."""

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = raw


class VersionFormatError(AppVersionsError, ValueError):
    """A version string is not three dot-separated integers."""
