"""Unified configuration management for the application."""
from __future__ import annotations

import json
import logging
import os
import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import ValidationError

from patternkit.config.schemas import AppConfig, LoggingConfig, ObserverConfig, StrategyConfig
from patternkit.config.utils.env_expansion import expand_config_env_vars
from patternkit.domain.exceptions import ConfigurationError

T = TypeVar("T")
logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = "PATTERNKIT_CONFIG"
LOG_LEVEL_ENV = "PATTERNKIT_LOG_LEVEL"


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    This class provides a unified interface for accessing configuration with:
    - Type safety through pydantic models
    - Environment variable expansion and overrides
    - Configuration validation
    - Lazy loading
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        """Configuration file in use, explicit or from the environment."""
        return self._config_file or os.environ.get(CONFIG_FILE_ENV)

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data = self._load_file(self.config_file) if self.config_file else {}
        config_data = expand_config_env_vars(config_data)
        config_data = self._apply_environment_overrides(config_data)

        try:
            return AppConfig.from_dict(config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}", details=e.errors()) from e

    def _load_file(self, path: str) -> Dict[str, Any]:
        if not os.path.exists(path):
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")

        logger.debug(f"Loaded configuration from {path}")
        return data

    def _apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        level = os.environ.get(LOG_LEVEL_ENV)
        if level:
            logging_section = dict(config_data.get("logging") or {})
            logging_section["level"] = level
            config_data = {**config_data, "logging": logging_section}
        return config_data

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a typed configuration section."""
        type_mapping = {
            LoggingConfig: "logging",
            ObserverConfig: "observer",
            StrategyConfig: "strategy",
        }
        if config_type is AppConfig:
            return self.app_config  # type: ignore[return-value]
        if config_type not in type_mapping:
            raise ValueError(f"Unknown configuration type: {config_type.__name__}")
        return getattr(self.app_config, type_mapping[config_type])

    def reload(self) -> None:
        """Reload configuration from sources."""
        with self._lock:
            self._app_config = None


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """
    Get the process-wide configuration manager.

    The first call decides the configuration file; later arguments are ignored.
    """
    from patternkit.infrastructure.patterns import get_singleton

    return get_singleton(ConfigurationManager, config_file)
