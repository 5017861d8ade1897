"""Store subject broadcasting notifications to its observers."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from patternkit.domain.exceptions import ConfigurationError
from patternkit.infrastructure.logging.logger import get_logger

from .observers import Observer


@dataclass(frozen=True)
class NotificationFailure:
    """An observer that raised while being notified."""

    observer: Observer
    error: Exception


@dataclass
class NotificationResult:
    """Outcome of broadcasting one message."""

    message: str
    delivered: int = 0
    failures: List[NotificationFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failures


class Store:
    """
    Subject keeping an ordered list of observers.

    Observers are notified in registration order. The store only holds
    references; removing an observer never touches its state.
    """

    def __init__(self, allow_duplicates: Optional[bool] = None):
        """
        Initialize the store.

        Args:
            allow_duplicates: Whether the same observer may be registered more
                than once. Defaults to ``ObserverConfig.allow_duplicates``.
        """
        self._logger = get_logger(__name__)
        if allow_duplicates is None:
            allow_duplicates = self._default_allow_duplicates()
        self.allow_duplicates = allow_duplicates
        self._observers: List[Observer] = []

    def _default_allow_duplicates(self) -> bool:
        from patternkit.config import ObserverConfig, get_config_manager

        try:
            return get_config_manager().get_typed(ObserverConfig).allow_duplicates
        except ConfigurationError as e:
            self._logger.warning(f"Falling back to default observer policy: {e}")
            return ObserverConfig().allow_duplicates

    @property
    def observers(self) -> Tuple[Observer, ...]:
        """Registered observers in notification order."""
        return tuple(self._observers)

    def __len__(self) -> int:
        return len(self._observers)

    def add_observer(self, observer: Observer) -> None:
        """Register an observer at the end of the notification order."""
        if not self.allow_duplicates and any(o is observer for o in self._observers):
            self._logger.debug(f"Observer {observer!r} already registered, ignoring")
            return
        self._observers.append(observer)

    add_customer = add_observer

    def remove_observer(self, observer: Observer) -> bool:
        """
        Drop the first registration of an observer.

        Returns:
            True if a registration was removed, False if none was found
        """
        for index, registered in enumerate(self._observers):
            if registered is observer:
                del self._observers[index]
                return True
        return False

    def notify(self, message: str) -> NotificationResult:
        """
        Call ``update(message)`` on every registered observer, in order.

        A failing observer is logged and skipped; the remaining observers
        are still notified.
        """
        result = NotificationResult(message=message)

        # Snapshot so observers may (un)register during the broadcast
        for observer in list(self._observers):
            try:
                observer.update(message)
                result.delivered += 1
            except Exception as e:
                self._logger.error(f"Observer {observer!r} failed to handle notification: {e}")
                result.failures.append(NotificationFailure(observer=observer, error=e))

        return result

    def new_arrival(self, item: str) -> NotificationResult:
        """Announce a newly arrived item to all observers."""
        self._logger.info(f"New arrival: {item}")
        return self.notify(f"New {item} has arrived in the store!")
