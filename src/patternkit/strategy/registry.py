"""Compression strategy registry keyed by algorithm name."""

import threading
from typing import Dict, List, Optional, Type

from patternkit.domain.exceptions import UnsupportedStrategyError
from patternkit.infrastructure.logging.logger import get_logger

from .compression import CompressionStrategy, RarCompression, ZipCompression


class CompressionStrategyRegistry:
    """
    Registry mapping algorithm names to strategy classes.

    Thread-safe singleton implementation.
    """

    _instance: Optional["CompressionStrategyRegistry"] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize strategy registry."""
        self._strategies: Dict[str, Type[CompressionStrategy]] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "CompressionStrategyRegistry":
        """Get singleton instance of the strategy registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = cls()
                    instance.register_strategy("zip", ZipCompression)
                    instance.register_strategy("rar", RarCompression)
                    cls._instance = instance
        return cls._instance

    def register_strategy(self, name: str, strategy_class: Type[CompressionStrategy]) -> None:
        """
        Register a strategy class under an algorithm name.

        Raises:
            ValueError: If the name is already registered
            TypeError: If strategy_class is not a CompressionStrategy subclass
        """
        if not (isinstance(strategy_class, type) and issubclass(strategy_class, CompressionStrategy)):
            raise TypeError(f"{strategy_class!r} is not a CompressionStrategy subclass")

        key = name.strip().lower()
        with self._registration_lock:
            if key in self._strategies:
                raise ValueError(f"Compression algorithm '{key}' is already registered")
            self._strategies[key] = strategy_class
            self._logger.debug(f"Registered compression strategy: {key}")

    def create_strategy(self, name: str) -> CompressionStrategy:
        """
        Create a strategy for an algorithm name.

        Raises:
            UnsupportedStrategyError: If the name is not registered
        """
        key = name.strip().lower()
        strategy_class = self._strategies.get(key)
        if strategy_class is None:
            raise UnsupportedStrategyError(key, self.get_registered_strategies())
        return strategy_class()

    def get_registered_strategies(self) -> List[str]:
        """Get list of all registered algorithm names."""
        return list(self._strategies.keys())


def get_strategy_registry() -> CompressionStrategyRegistry:
    """Get the global compression strategy registry instance."""
    return CompressionStrategyRegistry.get_instance()
