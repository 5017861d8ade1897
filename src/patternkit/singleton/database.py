"""Lazily created, thread-safe shared database handle."""

import threading
import uuid
from datetime import datetime, timezone
from typing import Optional

from patternkit.infrastructure.logging.logger import get_logger

# Only Database.get_instance() holds this key, so Database() cannot be
# called from outside the class.
_CREATION_KEY = object()


class Database:
    """
    Shared database handle.

    Exactly one instance exists per process. It is created on the first call
    to ``get_instance()`` from any thread and returned unchanged afterwards.
    The handle performs no real I/O; it only carries an identity.
    """

    _instance: Optional["Database"] = None
    _lock = threading.Lock()

    def __init__(self, _creation_key: object = None):
        """Initialize the handle. Use ``Database.get_instance()`` instead."""
        if _creation_key is not _CREATION_KEY:
            raise TypeError("Database is a singleton; use Database.get_instance()")
        self.connection_id = str(uuid.uuid4())
        self.created_at = datetime.now(timezone.utc)
        get_logger(__name__).info(f"Database instance created: {self.connection_id}")

    @classmethod
    def get_instance(cls) -> "Database":
        """Get the shared database instance, creating it on first access."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(_CREATION_KEY)
        return cls._instance

    def __repr__(self) -> str:
        return f"Database(connection_id={self.connection_id!r})"
