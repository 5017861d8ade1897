"""Transport products created by logistics creators."""

from abc import ABC, abstractmethod

from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Transport(ABC):
    """Product interface: anything that can perform a delivery."""

    @abstractmethod
    def deliver(self) -> str:
        """Perform a delivery and return a message describing it."""


class Truck(Transport):
    """Road transport."""

    def deliver(self) -> str:
        message = "Delivered by Truck."
        logger.info(message)
        return message


class Ship(Transport):
    """Sea transport."""

    def deliver(self) -> str:
        message = "Delivered by Ship."
        logger.info(message)
        return message
