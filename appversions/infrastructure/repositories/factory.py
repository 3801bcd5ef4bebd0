# ==============================================================================
# Repository Factory
# ==============================================================================
"""
Factory function for creating the session repository.

The database type is read once from configuration; each dialect supplies its
own query text and row shape.
"""

from appversions.base.repositories import SessionRepository
from appversions.utils.config import DatabaseSettings, DatabaseType


def get_session_repository(settings: DatabaseSettings) -> SessionRepository:
    """
    Get a repository for the configured database type.

    Drivers are imported lazily so only the configured one has to be
    installed and importable.

    Args:
        settings: Database connection settings

    Returns:
        Unconnected SessionRepository

    Raises:
        ValueError: If the database type is not supported
    """
    match settings.type:
        case DatabaseType.POSTGRESQL:
            from appversions.infrastructure.repositories.postgresql import (
                PostgreSQLSessionRepository,
            )

            return PostgreSQLSessionRepository(settings)
        case DatabaseType.MYSQL:
            from appversions.infrastructure.repositories.mysql import MySQLSessionRepository

            return MySQLSessionRepository(settings)
        case _:
            raise ValueError(
                f"Unsupported DB type: '{settings.type}'.\n"
                "Valid options are: postgresql, mysql"
            )
