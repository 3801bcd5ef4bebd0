# ==============================================================================
# Database Repository Adapters
# ==============================================================================
"""
Database adapters implementing the repository interface from base/repositories.py.

Currently supported:
- PostgreSQL (postgresql.py, psycopg2)
- MySQL (mysql.py, PyMySQL)
"""

from appversions.infrastructure.repositories.factory import get_session_repository

__all__ = ["get_session_repository"]
