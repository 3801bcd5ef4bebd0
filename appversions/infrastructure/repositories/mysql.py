# ==============================================================================
# MySQL Repository Implementation
# ==============================================================================
"""
MySQL implementation of SessionRepository.

Reads the CamelCase Mattermost schema (Sessions, Users) through PyMySQL.
"""

import logging
from collections.abc import Iterator

import pymysql

from appversions.base.repositories import SessionRepository, current_epoch_millis
from appversions.core.models import SessionRow, UserRecord
from appversions.errors import DatabaseConnectionError, QueryError
from appversions.utils.config import DatabaseSettings

logger = logging.getLogger(__name__)

ACTIVE_SESSIONS_QUERY = """
    SELECT UserId, Props, DeviceId, ExpiresAt
    FROM Sessions
    WHERE JSON_LENGTH(Props) > 0
      AND (ExpiresAt > %s OR ExpiresAt = 0)
"""

USER_QUERY = """
    SELECT Username, Email, FirstName, LastName
    FROM Users
    WHERE Id = %s
"""


class MySQLSessionRepository(SessionRepository):
    """MySQL implementation of SessionRepository."""

    def __init__(self, settings: DatabaseSettings):
        """
        Initialize the session repository.

        Args:
            settings: Database connection settings
        """
        self._settings = settings
        self._conn: pymysql.connections.Connection | None = None

    def connect(self) -> None:
        """Establish connection to MySQL."""
        s = self._settings
        try:
            self._conn = pymysql.connect(
                host=s.host,
                port=s.resolved_port,
                user=s.user,
                password=s.password,
                database=s.name,
                connect_timeout=s.connect_timeout,
                charset="utf8mb4",
            )
        except pymysql.MySQLError as e:
            raise DatabaseConnectionError(f"Error opening database: {e}") from e
        logger.debug("MySQLSessionRepository connected (%s:%s/%s)", s.host, s.resolved_port, s.name)

    def _require_conn(self) -> "pymysql.connections.Connection":
        if self._conn is None:
            raise RuntimeError("MySQL connection not established. Call connect() first.")
        return self._conn

    def iter_active_sessions(self, now_ms: int | None = None) -> Iterator[SessionRow]:
        conn = self._require_conn()
        now_ms = current_epoch_millis() if now_ms is None else now_ms

        try:
            with conn.cursor() as cur:
                cur.execute(ACTIVE_SESSIONS_QUERY, (now_ms,))
                for user_id, props, device_id, expires_at in cur:
                    if isinstance(props, bytes):
                        props = props.decode("utf-8")
                    yield SessionRow(
                        props=props,
                        device_id=device_id or "",
                        expires_at=expires_at,
                        user_id=user_id,
                    )
        except pymysql.MySQLError as e:
            raise QueryError(f"Error executing query: {e}") from e

    def get_user(self, user_id: str) -> list[UserRecord]:
        conn = self._require_conn()
        try:
            with conn.cursor() as cur:
                cur.execute(USER_QUERY, (user_id,))
                return [UserRecord(*(value or "" for value in row)) for row in cur.fetchall()]
        except pymysql.MySQLError as e:
            raise QueryError(f"Error executing query: {e}") from e

    def close(self) -> None:
        """Close connection and release resources."""
        if self._conn:
            try:
                self._conn.close()
                logger.debug("MySQLSessionRepository connection closed")
            except pymysql.MySQLError as e:
                logger.warning("Error closing connection: %s", e)
            finally:
                self._conn = None
