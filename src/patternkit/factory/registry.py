"""Logistics Registry - maps logistics categories to creator classes.

New categories are added by registering a creator class, never by editing
existing creators or conditionals.
"""

import threading
from typing import Dict, List, Optional, Type, Union

from patternkit.domain.exceptions import UnsupportedCategoryError
from patternkit.infrastructure.logging.logger import get_logger

from .logistics import Logistics, LogisticsCategory, RoadLogistics, SeaLogistics

CategoryKey = Union[LogisticsCategory, str]


def _normalize(category: CategoryKey) -> str:
    if isinstance(category, LogisticsCategory):
        return category.value
    return str(category).strip().lower()


class LogisticsRegistry:
    """
    Registry for logistics creator classes.

    Thread-safe singleton implementation.
    """

    _instance: Optional["LogisticsRegistry"] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize logistics registry."""
        self._registrations: Dict[str, Type[Logistics]] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "LogisticsRegistry":
        """Get singleton instance of logistics registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = cls()
                    register_default_logistics(instance)
                    cls._instance = instance
        return cls._instance

    def register_logistics(self, category: CategoryKey, creator_class: Type[Logistics]) -> None:
        """
        Register a creator class for a logistics category.

        Args:
            category: Category identifier (e.g., 'road', 'sea')
            creator_class: Logistics subclass creating the category's transport

        Raises:
            ValueError: If the category is already registered
            TypeError: If creator_class is not a Logistics subclass
        """
        if not (isinstance(creator_class, type) and issubclass(creator_class, Logistics)):
            raise TypeError(f"{creator_class!r} is not a Logistics subclass")

        key = _normalize(category)
        with self._registration_lock:
            if key in self._registrations:
                raise ValueError(f"Logistics category '{key}' is already registered")
            self._registrations[key] = creator_class
            self._logger.debug(f"Registered logistics: {key} -> {creator_class.__name__}")

    def create_logistics(self, category: CategoryKey) -> Logistics:
        """
        Create the creator registered for a category.

        Raises:
            UnsupportedCategoryError: If the category is not registered
        """
        key = _normalize(category)
        creator_class = self._registrations.get(key)
        if creator_class is None:
            raise UnsupportedCategoryError(key, self.get_registered_categories())
        return creator_class()

    def is_registered(self, category: CategoryKey) -> bool:
        """Check if a category is registered."""
        return _normalize(category) in self._registrations

    def get_registered_categories(self) -> List[str]:
        """Get list of all registered categories."""
        return list(self._registrations.keys())


def register_default_logistics(registry: LogisticsRegistry) -> None:
    """Register the built-in road and sea logistics."""
    registry.register_logistics(LogisticsCategory.ROAD, RoadLogistics)
    registry.register_logistics(LogisticsCategory.SEA, SeaLogistics)


def get_logistics_registry() -> LogisticsRegistry:
    """Get the global logistics registry instance."""
    return LogisticsRegistry.get_instance()
