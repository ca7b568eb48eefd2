# ABOUTME: Unit tests for library settings
# ABOUTME: Tests defaults, case-insensitive validation, environment loading and caching

import pytest
from pydantic import ValidationError

from filter_pipelines.config._base import BaseCoreSettings
from filter_pipelines.config.settings import CoreSettings, get_settings


class TestBaseCoreSettings:
    """Test suite for BaseCoreSettings configuration class."""

    @pytest.mark.unit
    @pytest.mark.config
    def test_default_values(self):
        """Test that default values are set correctly."""
        settings = BaseCoreSettings()

        assert settings.ENV == "development"
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_FORMAT == "txt"
        assert settings.LOG_FILE_ENABLED is False
        assert settings.LOG_FILE_PATH == "logs/filter-pipelines.log"
        assert settings.CHECK_CONTRACTS is True

    @pytest.mark.unit
    @pytest.mark.config
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("DEVELOPMENT", "development"),
            ("dev", "development"),
            ("develop", "development"),
            ("  dev  ", "development"),
            ("Production", "production"),
            ("PROD", "production"),
            ("stage", "staging"),
        ],
    )
    def test_env_aliases(self, raw, expected):
        """Test ENV accepts case-insensitive values and aliases."""
        assert BaseCoreSettings(ENV=raw).ENV == expected

    @pytest.mark.unit
    @pytest.mark.config
    def test_env_invalid_value(self):
        """Test ENV validation fails for unknown environments."""
        with pytest.raises(ValidationError):
            BaseCoreSettings(ENV="qa")

    @pytest.mark.unit
    @pytest.mark.config
    def test_log_level_normalized(self):
        """Test LOG_LEVEL is upper-cased and stripped."""
        assert BaseCoreSettings(LOG_LEVEL=" debug ").LOG_LEVEL == "DEBUG"
        assert BaseCoreSettings(LOG_LEVEL="trace").LOG_LEVEL == "TRACE"

        with pytest.raises(ValidationError):
            BaseCoreSettings(LOG_LEVEL="verbose")

    @pytest.mark.unit
    @pytest.mark.config
    def test_log_format_aliases(self):
        """Test LOG_FORMAT accepts structured/text aliases."""
        assert BaseCoreSettings(LOG_FORMAT="structured").LOG_FORMAT == "json"
        assert BaseCoreSettings(LOG_FORMAT="TEXT").LOG_FORMAT == "txt"

    @pytest.mark.unit
    @pytest.mark.config
    def test_loaded_from_prefixed_environment(self, monkeypatch):
        """Test settings are read from FILTER_PIPELINES_* variables."""
        monkeypatch.setenv("FILTER_PIPELINES_ENV", "prod")
        monkeypatch.setenv("FILTER_PIPELINES_CHECK_CONTRACTS", "false")
        monkeypatch.setenv("FILTER_PIPELINES_LOG_LEVEL", "warning")

        settings = BaseCoreSettings()

        assert settings.ENV == "production"
        assert settings.CHECK_CONTRACTS is False
        assert settings.LOG_LEVEL == "WARNING"

    @pytest.mark.unit
    @pytest.mark.config
    def test_unprefixed_environment_ignored(self, monkeypatch):
        """Test bare variable names do not leak into the library settings."""
        monkeypatch.setenv("CHECK_CONTRACTS", "false")

        assert BaseCoreSettings().CHECK_CONTRACTS is True


class TestCoreSettings:
    """Test suite for CoreSettings and get_settings."""

    @pytest.mark.unit
    @pytest.mark.config
    def test_inherits_base_settings(self):
        """Test CoreSettings is a BaseCoreSettings with the same defaults."""
        settings = CoreSettings()

        assert isinstance(settings, BaseCoreSettings)
        assert settings.CHECK_CONTRACTS is True

    @pytest.mark.unit
    @pytest.mark.config
    def test_get_settings_is_cached(self):
        """Test get_settings returns the same instance until the cache is cleared."""
        first = get_settings()

        assert get_settings() is first

        get_settings.cache_clear()
        assert get_settings() is not first
