"""Tests for application configuration."""

import pytest

from worldref.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep WORLDREF_ variables from the outside environment out of tests."""
    for name in ("DATABASE_URL", "WORLD_FILE", "DEBUG", "LOG_LEVEL"):
        monkeypatch.delenv(f"WORLDREF_{name}", raising=False)


class TestSettingsDefaults:
    """Tests for default configuration values."""

    def test_default_database_url(self):
        """Default database is a local SQLite file."""
        settings = Settings(_env_file=None)
        assert settings.database_url == "sqlite:///worldref.db"

    def test_default_world_file_unset(self):
        settings = Settings(_env_file=None)
        assert settings.world_file is None

    def test_default_debug_is_false(self):
        """Debug mode should be off by default."""
        settings = Settings(_env_file=None)
        assert settings.debug is False

    def test_default_log_level(self):
        settings = Settings(_env_file=None)
        assert settings.log_level == "WARNING"
        assert settings.effective_log_level == "WARNING"


class TestSettingsFromEnvironment:
    """Tests for environment overrides."""

    def test_database_url_from_env(self, monkeypatch):
        monkeypatch.setenv("WORLDREF_DATABASE_URL", "sqlite:///other.db")
        assert Settings(_env_file=None).database_url == "sqlite:///other.db"

    def test_env_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("worldref_log_level", "INFO")
        assert Settings(_env_file=None).log_level == "INFO"

    def test_debug_forces_debug_logging(self, monkeypatch):
        monkeypatch.setenv("WORLDREF_DEBUG", "true")
        settings = Settings(_env_file=None)
        assert settings.debug is True
        assert settings.effective_log_level == "DEBUG"

    def test_invalid_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("WORLDREF_LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError):
            Settings(_env_file=None)

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("WORLDREF_WORLD_FILE=worlds/lobby.json\n")
        assert Settings(_env_file=env_file).world_file == "worlds/lobby.json"


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_cached(self):
        assert get_settings() is get_settings()
