# ==============================================================================
# Infrastructure Adapters
# ==============================================================================
"""
Adapters for external services.

- repositories/ - Session and user readers (PostgreSQL, MySQL)
"""

from appversions.infrastructure.repositories import get_session_repository

__all__ = ["get_session_repository"]
