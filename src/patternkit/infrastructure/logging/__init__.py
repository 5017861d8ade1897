"""Logging infrastructure package."""

from .logger import get_logger, setup_logging, teardown_logging

__all__ = ["get_logger", "setup_logging", "teardown_logging"]
