# ==============================================================================
# Base Abstract Classes
# ==============================================================================
"""
Abstract base classes for the collaborators the scanner depends on.

Concrete database adapters live in infrastructure/repositories/.
"""

from appversions.base.repositories import SessionRepository, current_epoch_millis

__all__ = [
    "SessionRepository",
    "current_epoch_millis",
]
