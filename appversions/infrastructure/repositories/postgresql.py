# ==============================================================================
# PostgreSQL Repository Implementation
# ==============================================================================
"""
PostgreSQL implementation of SessionRepository.

Reads the lowercase Mattermost schema (sessions, users) through psycopg2.
"""

import logging
from collections.abc import Iterator

import psycopg2

from appversions.base.repositories import SessionRepository, current_epoch_millis
from appversions.core.models import SessionRow, UserRecord
from appversions.errors import DatabaseConnectionError, QueryError
from appversions.utils.config import DatabaseSettings

logger = logging.getLogger(__name__)

# props may be jsonb; cast so rows always carry the raw JSON text
ACTIVE_SESSIONS_QUERY = """
    SELECT userid, props::text, deviceid, expiresat
    FROM sessions
    WHERE props::text != '{}'
      AND (expiresat > %s OR expiresat = 0)
"""

USER_QUERY = """
    SELECT username, email, firstname, lastname
    FROM users
    WHERE id = %s
"""


class PostgreSQLSessionRepository(SessionRepository):
    """PostgreSQL implementation of SessionRepository."""

    def __init__(self, settings: DatabaseSettings):
        """
        Initialize the session repository.

        Args:
            settings: Database connection settings
        """
        self._settings = settings
        self._conn: psycopg2.extensions.connection | None = None

    def connect(self) -> None:
        """Establish connection to PostgreSQL."""
        s = self._settings
        try:
            self._conn = psycopg2.connect(
                host=s.host,
                port=s.resolved_port,
                user=s.user,
                password=s.password,
                dbname=s.name,
                sslmode=s.sslmode,
                connect_timeout=s.connect_timeout,
            )
        except psycopg2.Error as e:
            raise DatabaseConnectionError(f"Error opening database: {e}") from e
        logger.debug(
            "PostgreSQLSessionRepository connected (%s:%s/%s)", s.host, s.resolved_port, s.name
        )

    def _require_conn(self) -> "psycopg2.extensions.connection":
        if self._conn is None:
            raise RuntimeError("PostgreSQL connection not established. Call connect() first.")
        return self._conn

    def iter_active_sessions(self, now_ms: int | None = None) -> Iterator[SessionRow]:
        conn = self._require_conn()
        now_ms = current_epoch_millis() if now_ms is None else now_ms

        try:
            with conn.cursor() as cur:
                cur.execute(ACTIVE_SESSIONS_QUERY, (now_ms,))
                for user_id, props, device_id, expires_at in cur:
                    yield SessionRow(
                        props=props,
                        device_id=device_id or "",
                        expires_at=expires_at,
                        user_id=user_id,
                    )
        except psycopg2.Error as e:
            raise QueryError(f"Error executing query: {e}") from e

    def get_user(self, user_id: str) -> list[UserRecord]:
        conn = self._require_conn()
        try:
            with conn.cursor() as cur:
                cur.execute(USER_QUERY, (user_id,))
                return [UserRecord(*(value or "" for value in row)) for row in cur.fetchall()]
        except psycopg2.Error as e:
            raise QueryError(f"Error executing query: {e}") from e

    def close(self) -> None:
        """Close connection and release resources."""
        if self._conn:
            try:
                self._conn.close()
                logger.debug("PostgreSQLSessionRepository connection closed")
            except psycopg2.Error as e:
                logger.warning("Error closing connection: %s", e)
            finally:
                self._conn = None
