"""Logistics creators deferring transport construction to subclasses."""

from abc import ABC, abstractmethod
from enum import Enum

from .transport import Ship, Transport, Truck


class LogisticsCategory(str, Enum):
    """Built-in logistics categories."""

    ROAD = "road"
    SEA = "sea"


class Logistics(ABC):
    """
    Creator interface.

    Subclasses decide which concrete transport ``create_transport()``
    returns. Everything else about planning a delivery is shared.
    """

    @abstractmethod
    def create_transport(self) -> Transport:
        """Create the transport used by this kind of logistics."""

    def plan_delivery(self) -> str:
        """Create a transport and deliver with it."""
        transport = self.create_transport()
        return transport.deliver()


class RoadLogistics(Logistics):
    """Delivers over land."""

    def create_transport(self) -> Transport:
        return Truck()


class SeaLogistics(Logistics):
    """Delivers over sea."""

    def create_transport(self) -> Transport:
        return Ship()
