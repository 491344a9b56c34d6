"""Unit tests for configuration settings."""

import pytest
from pydantic import ValidationError

from recordmapper.infrastructure.config import MapperSettings, get_settings


class TestMapperSettings:
    """Test MapperSettings configuration class."""

    def test_settings_initialization(self):
        """Test MapperSettings can be initialized with defaults."""
        settings = MapperSettings()

        assert settings.environment == "development"
        assert settings.is_development is True
        assert settings.copy_values is True
        assert settings.log_level == "WARNING"
        assert settings.log_json is False

    def test_settings_from_environment(self, monkeypatch):
        """Test settings are read from RECORDMAPPER_ variables."""
        monkeypatch.setenv("RECORDMAPPER_COPY_VALUES", "false")
        monkeypatch.setenv("RECORDMAPPER_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("RECORDMAPPER_LOG_JSON", "true")

        settings = MapperSettings()

        assert settings.copy_values is False
        assert settings.log_level == "DEBUG"
        assert settings.log_json is True

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            MapperSettings(log_level="VERBOSE")

    def test_unrelated_variables_ignored(self, monkeypatch):
        """Test variables without the prefix do not leak in."""
        monkeypatch.setenv("COPY_VALUES", "false")

        assert MapperSettings().copy_values is True


class TestGetSettings:
    """Test cached settings access."""

    def test_get_settings_is_cached(self):
        """Test the same instance is returned until the cache is cleared."""
        first = get_settings()

        assert get_settings() is first

        get_settings.cache_clear()
        assert get_settings() is not first
