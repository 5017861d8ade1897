"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field

from .logging_schema import LoggingConfig
from .patterns_schema import ObserverConfig, StrategyConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    observer: ObserverConfig = Field(default_factory=lambda: ObserverConfig())
    strategy: StrategyConfig = Field(default_factory=lambda: StrategyConfig())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create configuration from a plain dictionary."""
        return cls(**data)


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """
    Validate configuration.

    Args:
        config: Configuration to validate

    Returns:
        Validated configuration

    Raises:
        ValueError: If configuration is invalid
    """
    return AppConfig.from_dict(config)
