"""Domain layer - exception hierarchy shared by the pattern components."""

from .exceptions import (
    ConfigurationError,
    PatternKitError,
    UnknownAdditionError,
    UnsupportedCategoryError,
    UnsupportedStrategyError,
)

__all__ = [
    "PatternKitError",
    "ConfigurationError",
    "UnsupportedCategoryError",
    "UnsupportedStrategyError",
    "UnknownAdditionError",
]
