"""Lazy singleton example: one shared database handle per process."""

from .database import Database

__all__ = ["Database"]
