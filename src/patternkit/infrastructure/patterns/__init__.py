"""Infrastructure patterns package."""

from patternkit.infrastructure.patterns.singleton_access import get_singleton
from patternkit.infrastructure.patterns.singleton_registry import SingletonRegistry

__all__ = ["SingletonRegistry", "get_singleton"]
