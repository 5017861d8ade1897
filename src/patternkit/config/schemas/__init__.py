"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .logging_schema import LoggingConfig
from .patterns_schema import ObserverConfig, StrategyConfig

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",
    # Logging configuration
    "LoggingConfig",
    # Pattern configurations
    "ObserverConfig",
    "StrategyConfig",
]
