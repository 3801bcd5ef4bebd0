# ==============================================================================
# Repository Abstract Base Classes
# ==============================================================================
"""
Repository ABC for reading sessions and users.

This defines the "what" (active sessions, user details) not the "how"
(table names, SQL dialect, driver). Concrete implementations in
infrastructure/ supply the query text and row shape for each database.
"""

import time
from abc import ABC, abstractmethod
from collections.abc import Iterator

from appversions.core.models import SessionRow, UserRecord


def current_epoch_millis() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


class SessionRepository(ABC):
    """
    Read-only repository over session and user records.

    Usable as a context manager: the connection is opened on enter and
    closed on every exit path.
    """

    @abstractmethod
    def connect(self) -> None:
        """
        Establish connection to the data store.

        Raises:
            DatabaseConnectionError: If the driver cannot open a connection
        """
        ...

    @abstractmethod
    def iter_active_sessions(self, now_ms: int | None = None) -> Iterator[SessionRow]:
        """
        Yield sessions that have properties and have not expired.

        A session is active when its expiry is 0 (never expires) or later
        than now_ms.

        Args:
            now_ms: Reference time in epoch milliseconds. Defaults to now.

        Raises:
            QueryError: If the query fails or a row cannot be read
        """
        ...

    @abstractmethod
    def get_user(self, user_id: str) -> list[UserRecord]:
        """
        Look up the user owning a session.

        Returns:
            Matching users (normally zero or one)

        Raises:
            QueryError: If the query fails
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Close connection and release resources."""
        ...

    def __enter__(self) -> "SessionRepository":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
