"""Tests for Settings configuration helpers."""

from pathlib import Path

import pytest

from render_config.config.settings import (
    LogLevel,
    Settings,
    build_settings,
    settings_from_env,
)
from render_config.domain import Environment


@pytest.fixture
def default_settings():
    """Provide default Settings for comparison."""
    return Settings()


class TestSettingsDefaults:
    def test_defaults(self, default_settings):
        assert default_settings.environment is Environment.PRODUCTION
        assert default_settings.log_level == LogLevel.INFO
        assert default_settings.snapshot_path == Path(".render_config.kdl")
        assert default_settings.env_var == "RENDER_ENV"

    def test_frozen(self, default_settings):
        with pytest.raises(AttributeError):
            default_settings.log_level = LogLevel.DEBUG


class TestBuildSettings:
    """Test our build_settings helper logic."""

    def test_filters_none_values(self, default_settings):
        """build_settings ignores None overrides."""
        settings = build_settings(
            snapshot_path=None,
            log_level=LogLevel.DEBUG,
        )

        assert settings.snapshot_path == default_settings.snapshot_path
        assert settings.log_level == LogLevel.DEBUG

    def test_applies_all_overrides(self):
        """build_settings applies all non-None overrides."""
        settings = build_settings(
            environment=Environment.DEVELOPMENT,
            log_level=LogLevel.ERROR,
            snapshot_path=Path("/tmp/options.kdl"),
            env_var="APP_ENV",
        )

        assert settings.environment is Environment.DEVELOPMENT
        assert settings.log_level == LogLevel.ERROR
        assert settings.snapshot_path == Path("/tmp/options.kdl")
        assert settings.env_var == "APP_ENV"

    def test_unknown_override_rejected(self):
        with pytest.raises(TypeError, match="max_workers"):
            build_settings(max_workers=3)


class TestSettingsFromEnv:
    """Reading settings from environment variables."""

    def test_empty_environment(self, default_settings):
        assert settings_from_env({}) == default_settings

    def test_reads_environment_and_level(self):
        settings = settings_from_env(
            {"RENDER_ENV": "dev", "RENDER_CONFIG_LOG_LEVEL": "debug"}
        )
        assert settings.environment is Environment.DEVELOPMENT
        assert settings.log_level == LogLevel.DEBUG

    def test_unknown_level_falls_back(self):
        settings = settings_from_env({"RENDER_CONFIG_LOG_LEVEL": "chatty"})
        assert settings.log_level == LogLevel.INFO

    def test_defaults_to_os_environ(self, monkeypatch):
        monkeypatch.setenv("RENDER_ENV", "development")
        monkeypatch.delenv("RENDER_CONFIG_LOG_LEVEL", raising=False)
        assert settings_from_env().environment is Environment.DEVELOPMENT
