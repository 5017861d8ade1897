"""Configuration package with clean public API."""

# Main configuration classes
from .schemas import (
    AppConfig,
    LoggingConfig,
    ObserverConfig,
    StrategyConfig,
    validate_config,
)

# Configuration management
from .manager import ConfigurationManager, get_config_manager

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",
    # Specific configurations
    "LoggingConfig",
    "ObserverConfig",
    "StrategyConfig",
    # Configuration management
    "ConfigurationManager",
    "get_config_manager",
]
