"""Process-wide registry of singleton instances."""

import threading
from typing import Any, Dict, List, Optional, Type, TypeVar, cast

from patternkit.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Registry holding at most one instance per registered class.

    The registry itself is a singleton obtained through ``get_instance()``.
    Instances are created lazily on first request using double-checked
    locking: the registry lock is only taken while the instance appears
    unset, and only for the construct-and-publish step.

    Thread-safe singleton implementation.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.Lock()

    def __init__(self):
        """Initialize singleton registry."""
        self._instances: Dict[Type[Any], Any] = {}
        self._instances_lock = threading.RLock()
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get singleton instance of the registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of a class, creating it on first request.

        Args:
            singleton_class: The class to get an instance of
            *args: Arguments to pass to the constructor if creating a new instance
            **kwargs: Keyword arguments to pass to the constructor if creating a new instance

        Returns:
            The shared instance
        """
        instance = self._instances.get(singleton_class)
        if instance is None:
            with self._instances_lock:
                instance = self._instances.get(singleton_class)
                if instance is None:
                    instance = singleton_class(*args, **kwargs)
                    self._instances[singleton_class] = instance
                    self._logger.debug(f"Created singleton instance of {singleton_class.__name__}")
        return cast(T, instance)

    def has(self, singleton_class: Type[Any]) -> bool:
        """Check whether an instance of the class has been created."""
        return singleton_class in self._instances

    def get_registered_classes(self) -> List[str]:
        """Get names of all classes with a live instance."""
        return [cls.__name__ for cls in self._instances]
