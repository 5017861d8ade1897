"""Observer interface and the customer observer."""

from abc import ABC, abstractmethod
from typing import List

from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Observer(ABC):
    """Anything that wants to be told about subject state changes."""

    @abstractmethod
    def update(self, message: str) -> None:
        """Receive a notification message."""


class Customer(Observer):
    """A store customer who keeps every notification received."""

    def __init__(self, name: str):
        self.name = name
        self.notifications: List[str] = []

    def update(self, message: str) -> None:
        logger.info(f"{self.name} received notification: {message}")
        self.notifications.append(message)

    def __repr__(self) -> str:
        return f"Customer(name={self.name!r})"
