# ==============================================================================
# App Versions Domain Models
# ==============================================================================
"""
Pydantic models and value types for session classification.

These models are used for:
- Validating the JSON property blob stored with each session
- Carrying raw session rows from a repository to the scanner
- Type safety for aggregated version counts and lookup matches

This module is part of the core domain layer and has no external dependencies
beyond Pydantic.
"""

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Literal marker identifying a desktop client in the browser field
DESKTOP_APP_MARKER = "Desktop App"

# Operating systems that always identify a mobile client
MOBILE_OPERATING_SYSTEMS = frozenset({"Android", "iOS"})

# Version reported by clients that could not identify themselves
PLACEHOLDER_VERSION = "0.0"


class ClientClass(str, Enum):
    """Kind of client a session originated from."""

    DESKTOP = "desktop"
    MOBILE = "mobile"
    UNCLASSIFIED = "unclassified"


class SessionRow(NamedTuple):
    """A raw active session as returned by a SessionRepository."""

    props: str
    device_id: str
    expires_at: int
    user_id: str | None = None


class SessionProperties(BaseModel):
    """
    Decoded session property blob.

    Attributes:
        browser: Free-text client identifier, e.g. "Mattermost Desktop App/5.5.0"
        os: Operating system reported by the client
        is_mobile: Stringly-typed flag, "true" for mobile clients
        device_id: Device identifier, taken from the session row rather than
            the JSON blob
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    browser: str = Field(default="", description="Client identifier string")
    os: str = Field(default="", description="Operating system")
    is_mobile: str = Field(default="", alias="isMobile", description="Mobile flag")
    device_id: str = Field(default="", alias="deviceid", description="Device identifier")

    @field_validator("browser", "os", "is_mobile", "device_id", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        """A JSON null leaves the field at its zero value."""
        return "" if value is None else value


class VersionInfo(NamedTuple):
    """Number of sessions seen on one operating system for a version."""

    os: str
    count: int


# Version string -> per-OS counts
AggregateCounts = dict[str, list[VersionInfo]]


class UserRecord(NamedTuple):
    """User details joined onto a matching session in lookup mode."""

    username: str
    email: str
    first_name: str
    last_name: str


class LookupMatch(NamedTuple):
    """One output row of lookup mode."""

    version: str
    os: str
    username: str
    email: str
    first_name: str
    last_name: str

    @classmethod
    def from_user(cls, version: str, os: str, user: UserRecord) -> "LookupMatch":
        """Build a match from a session's version/OS and its owning user."""
        return cls(version, os, user.username, user.email, user.first_name, user.last_name)
