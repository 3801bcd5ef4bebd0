# ==============================================================================
# Shared Test Fixtures
# ==============================================================================
"""
Pytest fixtures shared across all test modules.

Provides:
- An in-memory SessionRepository so scans run without a database
- Helpers for building session rows and config files
"""

import json
from collections.abc import Iterator

import pytest

from appversions.base.repositories import SessionRepository
from appversions.core.models import SessionRow, UserRecord
from appversions.errors import QueryError


def make_row(
    browser: str = "",
    os: str = "",
    is_mobile: str | None = None,
    device_id: str = "",
    user_id: str | None = None,
    expires_at: int = 0,
) -> SessionRow:
    """Build a session row whose props blob carries the given fields."""
    props = {"browser": browser, "os": os}
    if is_mobile is not None:
        props["isMobile"] = is_mobile
    return SessionRow(
        props=json.dumps(props),
        device_id=device_id,
        expires_at=expires_at,
        user_id=user_id,
    )


class FakeSessionRepository(SessionRepository):
    """In-memory SessionRepository recording how it was used."""

    def __init__(
        self,
        rows: list[SessionRow] | None = None,
        users: dict[str, list[UserRecord]] | None = None,
        fail_on_query: bool = False,
        connect_error: Exception | None = None,
    ):
        self.rows = rows or []
        self.users = users or {}
        self.fail_on_query = fail_on_query
        self.connect_error = connect_error
        self.connected = False
        self.closed = False
        self.user_queries: list[str] = []
        self.now_ms: int | None = None

    def connect(self) -> None:
        if self.connect_error is not None:
            raise self.connect_error
        self.connected = True

    def iter_active_sessions(self, now_ms: int | None = None) -> Iterator[SessionRow]:
        self.now_ms = now_ms
        if self.fail_on_query:
            raise QueryError("Error executing query: relation \"sessions\" does not exist")
        yield from self.rows

    def get_user(self, user_id: str) -> list[UserRecord]:
        self.user_queries.append(user_id)
        return self.users.get(user_id, [])

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def fake_repository():
    """An empty in-memory repository; tests fill rows/users as needed."""
    return FakeSessionRepository()


@pytest.fixture()
def write_config(tmp_path):
    """Factory writing a JSON config file and returning its path."""

    def _write(db: dict | None = None, raw: str | None = None):
        path = tmp_path / "config.json"
        if raw is not None:
            path.write_text(raw)
        else:
            path.write_text(json.dumps({"db": db if db is not None else {}}))
        return path

    return _write


@pytest.fixture()
def postgres_config(write_config):
    """A valid PostgreSQL config file."""
    return write_config(
        {
            "type": "postgresql",
            "host": "db.example.com",
            "port": 5432,
            "name": "mattermost",
            "user": "mmuser",
            "password": "secret",
        }
    )


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep APPVERSIONS_DB_* variables from the developer's shell out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("APPVERSIONS_DB_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def row():
    """The make_row helper, as a fixture."""
    return make_row


@pytest.fixture()
def repository_factory():
    """Factory for FakeSessionRepository instances."""
    return FakeSessionRepository
