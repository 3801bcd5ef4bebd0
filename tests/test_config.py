# ==============================================================================
# Tests for Configuration Loading
# ==============================================================================
"""
Unit tests for load_settings().

Tests cover:
- Valid PostgreSQL and MySQL config files
- Default ports per database type
- Environment variables filling fields absent from the file
- Missing files, invalid JSON and unsupported database types raising ConfigError
"""

import pytest

from appversions.errors import ConfigError
from appversions.utils.config import DatabaseType, load_settings


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_postgresql(self, postgres_config):
        settings = load_settings(postgres_config)
        assert settings.db.type is DatabaseType.POSTGRESQL
        assert settings.db.host == "db.example.com"
        assert settings.db.resolved_port == 5432
        assert settings.db.name == "mattermost"
        assert settings.db.user == "mmuser"
        assert settings.db.password == "secret"
        assert settings.config_file == postgres_config

    def test_mysql_default_port(self, write_config):
        path = write_config({"type": "mysql", "host": "h", "name": "mm", "user": "u"})
        settings = load_settings(path)
        assert settings.db.type is DatabaseType.MYSQL
        assert settings.db.resolved_port == 3306

    def test_postgresql_default_port(self, write_config):
        path = write_config({"type": "postgresql", "host": "h", "name": "mm", "user": "u"})
        assert load_settings(path).db.resolved_port == 5432

    def test_explicit_port_wins(self, write_config):
        path = write_config({"type": "mysql", "port": 13306, "name": "mm", "user": "u"})
        assert load_settings(path).db.resolved_port == 13306

    def test_environment_fills_missing_fields(self, write_config, monkeypatch):
        monkeypatch.setenv("APPVERSIONS_DB_PASSWORD", "from-env")
        path = write_config({"type": "postgresql", "name": "mm", "user": "u"})
        assert load_settings(path).db.password == "from-env"

    def test_file_wins_over_environment(self, postgres_config, monkeypatch):
        monkeypatch.setenv("APPVERSIONS_DB_PASSWORD", "from-env")
        assert load_settings(postgres_config).db.password == "secret"

    def test_masked_password(self, postgres_config):
        assert load_settings(postgres_config).db.masked_password == "********"

    def test_unsupported_type(self, write_config):
        path = write_config({"type": "sqlite", "name": "mm", "user": "u"})
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "nope.json")

    def test_invalid_json(self, write_config):
        path = write_config(raw="{ this is not json")
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_missing_db_section(self, write_config):
        path = write_config(raw="{}")
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_non_object_file(self, write_config):
        path = write_config(raw="[1, 2, 3]")
        with pytest.raises(ConfigError, match="JSON object"):
            load_settings(path)

    def test_invalid_port(self, write_config):
        path = write_config({"type": "mysql", "port": "abc", "name": "mm", "user": "u"})
        with pytest.raises(ConfigError):
            load_settings(path)
