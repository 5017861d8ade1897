"""Tests for the configuration manager and schemas."""

import pytest
from pydantic import ValidationError

from patternkit.config import (
    AppConfig,
    ConfigurationManager,
    LoggingConfig,
    ObserverConfig,
    StrategyConfig,
    get_config_manager,
)
from patternkit.domain.exceptions import ConfigurationError


class TestSchemas:
    """Test pydantic schema validation."""

    def test_defaults(self):
        config = AppConfig()

        assert config.logging.level == "INFO"
        assert config.logging.destination == "console"
        assert config.observer.allow_duplicates is True
        assert config.strategy.default_algorithm == "zip"

    def test_log_level_normalised(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    @pytest.mark.parametrize(
        "data",
        [
            {"level": "LOUD"},
            {"destination": "syslog"},
            {"max_size_mb": 0},
            {"backup_count": -1},
        ],
    )
    def test_invalid_logging_values(self, data):
        with pytest.raises(ValidationError):
            LoggingConfig(**data)

    def test_default_algorithm_normalised_and_required(self):
        assert StrategyConfig(default_algorithm=" RAR ").default_algorithm == "rar"
        with pytest.raises(ValidationError):
            StrategyConfig(default_algorithm="  ")


class TestConfigurationManager:
    """Test configuration loading."""

    def test_defaults_without_file(self):
        manager = ConfigurationManager()

        assert manager.app_config == AppConfig()

    def test_load_from_file(self, config_file):
        path = config_file({"strategy": {"default_algorithm": "rar"}, "observer": {"allow_duplicates": False}})
        manager = ConfigurationManager(path)

        assert manager.get_typed(StrategyConfig).default_algorithm == "rar"
        assert manager.get_typed(ObserverConfig).allow_duplicates is False
        assert manager.get_typed(AppConfig) is manager.app_config

    def test_file_from_environment(self, config_file, monkeypatch):
        monkeypatch.setenv("PATTERNKIT_CONFIG", config_file({"logging": {"level": "ERROR"}}))

        assert ConfigurationManager().get_typed(LoggingConfig).level == "ERROR"

    def test_env_vars_expanded_in_file(self, config_file, monkeypatch):
        monkeypatch.setenv("PK_LOG_DIR", "/var/log/pk")
        path = config_file({"logging": {"file_path": "${PK_LOG_DIR}/app.log"}})

        assert ConfigurationManager(path).app_config.logging.file_path == "/var/log/pk/app.log"

    def test_log_level_override(self, config_file, monkeypatch):
        monkeypatch.setenv("PATTERNKIT_LOG_LEVEL", "warning")
        path = config_file({"logging": {"level": "DEBUG", "destination": "console"}})

        logging_config = ConfigurationManager(path).get_typed(LoggingConfig)

        assert logging_config.level == "WARNING"
        assert logging_config.destination == "console"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigurationManager(str(tmp_path / "missing.json")).app_config

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            ConfigurationManager(str(path)).app_config

    def test_directory_path_raises(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read configuration file"):
            ConfigurationManager(str(tmp_path)).app_config

    def test_invalid_utf8_raises(self, tmp_path):
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe")

        with pytest.raises(ConfigurationError, match="Cannot read configuration file"):
            ConfigurationManager(str(path)).app_config

    def test_non_object_json_raises(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="JSON object"):
            ConfigurationManager(str(path)).app_config

    def test_validation_failure_raises_configuration_error(self, config_file):
        path = config_file({"logging": {"level": "LOUD"}})

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager(path).app_config

        assert exc_info.value.details

    def test_unknown_section_type(self):
        with pytest.raises(ValueError, match="Unknown configuration type"):
            ConfigurationManager().get_typed(dict)

    def test_reload_picks_up_changes(self, config_file):
        path = config_file({"strategy": {"default_algorithm": "zip"}})
        manager = ConfigurationManager(path)
        assert manager.app_config.strategy.default_algorithm == "zip"

        config_file({"strategy": {"default_algorithm": "rar"}})
        assert manager.app_config.strategy.default_algorithm == "zip"

        manager.reload()
        assert manager.app_config.strategy.default_algorithm == "rar"

    def test_get_config_manager_is_process_wide(self):
        assert get_config_manager() is get_config_manager()
