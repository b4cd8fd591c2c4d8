"""Tests for configuration loading and validation."""

import pytest

from ood_principles.config import (
    DEFAULT_CONFIG,
    AppConfig,
    ConfigurationManager,
    LogDestination,
    LogLevel,
    LoggingConfig,
)
from ood_principles.domain.base.exceptions import ConfigurationError


class TestConfigurationManager:
    """Test configuration manager behaviour."""

    def test_defaults_without_file(self, clean_env):
        config = ConfigurationManager().app_config

        assert isinstance(config, AppConfig)
        assert config.logging.level == LogLevel.WARNING
        assert config.logging.destination == LogDestination.STDOUT
        assert config.demo.request_url == "https://example.com/data.json"

    def test_defaults_are_not_mutated(self, clean_env, config_file):
        path = config_file({"logging": {"level": "DEBUG"}})
        ConfigurationManager(path).app_config

        assert DEFAULT_CONFIG["logging"]["level"] == "${OOD_LOG_LEVEL:WARNING}"

    def test_file_overrides_are_deep_merged(self, clean_env, config_file):
        path = config_file({"logging": {"level": "debug"}, "demo": {"travel_seconds": 5}})
        config = ConfigurationManager(path).app_config

        assert config.logging.level == LogLevel.DEBUG
        assert config.logging.backup_count == 5
        assert config.demo.travel_seconds == 5.0
        assert config.demo.request_url == "https://example.com/data.json"

    def test_environment_placeholders_expanded(self, clean_env, monkeypatch):
        monkeypatch.setenv("OOD_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("OOD_DEMO_REQUEST_URL", "https://example.org/x")
        config = ConfigurationManager().app_config

        assert config.logging.level == LogLevel.ERROR
        assert config.demo.request_url == "https://example.org/x"

    def test_config_file_from_environment(self, clean_env, monkeypatch, config_file):
        monkeypatch.setenv("OOD_CONFIG_FILE", config_file({"demo": {"travel_seconds": 1}}))
        assert ConfigurationManager().app_config.demo.travel_seconds == 1.0

    def test_missing_file_raises(self, clean_env, tmp_path):
        with pytest.raises(ConfigurationError):
            ConfigurationManager(str(tmp_path / "missing.json")).app_config

    def test_invalid_json_raises(self, clean_env, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError):
            ConfigurationManager(str(path)).app_config

    def test_non_object_file_raises(self, clean_env, config_file):
        with pytest.raises(ConfigurationError):
            ConfigurationManager(config_file([1, 2])).app_config

    def test_invalid_values_raise(self, clean_env, config_file):
        path = config_file({"logging": {"level": "LOUD"}})
        with pytest.raises(ConfigurationError):
            ConfigurationManager(path).app_config

    def test_reload_picks_up_changes(self, clean_env, monkeypatch):
        manager = ConfigurationManager()
        assert manager.app_config.logging.level == LogLevel.WARNING

        monkeypatch.setenv("OOD_LOG_LEVEL", "INFO")
        assert manager.app_config.logging.level == LogLevel.WARNING
        manager.reload()
        assert manager.app_config.logging.level == LogLevel.INFO


class TestLoggingConfig:
    """Test logging schema validation."""

    def test_file_destination_requires_path(self):
        with pytest.raises(ValueError):
            AppConfig(logging=LoggingConfig(destination=LogDestination.FILE))

    def test_destination_flags(self):
        both = LoggingConfig(destination=LogDestination.BOTH, file_path="x.log")
        assert both.writes_to_file and both.writes_to_stdout

    def test_backup_count_must_be_positive(self):
        with pytest.raises(ValueError):
            LoggingConfig(backup_count=0)

    def test_schema_default_level_matches_default_config(self, clean_env):
        assert LoggingConfig().level == ConfigurationManager().app_config.logging.level
