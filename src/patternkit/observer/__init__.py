"""Observer example: a store notifying its customers."""

from .observers import Customer, Observer
from .store import NotificationFailure, NotificationResult, Store

__all__ = [
    "Observer",
    "Customer",
    "Store",
    "NotificationResult",
    "NotificationFailure",
]
