# ==============================================================================
# Application Configuration
# ==============================================================================
"""
Configuration management using pydantic-settings.

Database settings are read from a JSON config file of the form:

    {"db": {"type": "postgresql", "host": "...", "port": 5432,
            "name": "...", "user": "...", "password": "..."}}

Any field missing from the file is taken from an APPVERSIONS_DB_* environment
variable, with support for .env files via python-dotenv. Values in the file
win over the environment.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from appversions.errors import ConfigError

# Load .env file before any settings are instantiated
load_dotenv()

DEFAULT_CONFIG_FILE = Path("config.json")


class DatabaseType(str, Enum):
    """Supported database dialects."""

    POSTGRESQL = "postgresql"
    MYSQL = "mysql"

    @property
    def default_port(self) -> int:
        return 5432 if self is DatabaseType.POSTGRESQL else 3306


class DatabaseSettings(BaseSettings):
    """Database connection settings."""

    model_config = SettingsConfigDict(env_prefix="APPVERSIONS_DB_", extra="ignore")

    type: DatabaseType = Field(..., description="Database type (postgresql or mysql)")
    host: str = Field(default="localhost", description="Database host")
    port: Optional[int] = Field(default=None, description="Database port")
    name: str = Field(..., description="Database name")
    user: str = Field(..., description="Database username")
    password: str = Field(default="", description="Database password")

    # PostgreSQL only
    sslmode: str = Field(default="disable", description="PostgreSQL SSL mode")
    connect_timeout: int = Field(default=10, description="Connection timeout in seconds")

    @property
    def resolved_port(self) -> int:
        """Configured port, or the dialect's default."""
        return self.port if self.port is not None else self.type.default_port

    @property
    def masked_password(self) -> str:
        return "********" if self.password else ""


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(extra="ignore")

    db: DatabaseSettings
    config_file: Path = Field(default=DEFAULT_CONFIG_FILE, description="Source config file")


def load_settings(config_file: Path | str = DEFAULT_CONFIG_FILE) -> Settings:
    """
    Load settings from a JSON config file.

    Args:
        config_file: Path to the JSON config file

    Returns:
        Validated Settings

    Raises:
        ConfigError: If the file is missing or unreadable, is not valid JSON,
            or fails validation (including an unsupported database type)
    """
    path = Path(config_file)

    try:
        raw = json.loads(path.read_text())
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except OSError as e:
        raise ConfigError(f"Error reading config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Error reading config file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    db_section = raw.get("db") or {}
    if not isinstance(db_section, dict):
        raise ConfigError(f"'db' section in {path} must be a JSON object")

    try:
        return Settings(db=DatabaseSettings(**db_section), config_file=path)
    except ValidationError as e:
        raise ConfigError(f"Unable to decode config file {path}: {e}") from e
