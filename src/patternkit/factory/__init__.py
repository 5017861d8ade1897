"""Factory method example: logistics creators and transport products."""

from .logistics import Logistics, LogisticsCategory, RoadLogistics, SeaLogistics
from .registry import LogisticsRegistry, get_logistics_registry, register_default_logistics
from .transport import Ship, Transport, Truck

__all__ = [
    "Transport",
    "Truck",
    "Ship",
    "Logistics",
    "LogisticsCategory",
    "RoadLogistics",
    "SeaLogistics",
    "LogisticsRegistry",
    "get_logistics_registry",
    "register_default_logistics",
]
