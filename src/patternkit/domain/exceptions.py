"""Exception hierarchy shared by the pattern components."""
from typing import Any, List, Optional


class PatternKitError(Exception):
    """Base exception for all patternkit errors."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ConfigurationError(PatternKitError):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None, details: Any = None):
        super().__init__(message, details)
        self.missing_fields = missing_fields or []


class UnsupportedCategoryError(PatternKitError):
    """Raised when a logistics category has no registered creator."""
    def __init__(self, category: str, available: Optional[List[str]] = None):
        self.available = available or []
        super().__init__(
            f"Unsupported logistics category '{category}'. Available: {self.available}"
        )
        self.category = category


class UnsupportedStrategyError(PatternKitError):
    """Raised when a compression algorithm has no registered strategy."""
    def __init__(self, name: str, available: Optional[List[str]] = None):
        self.available = available or []
        super().__init__(
            f"Unsupported compression algorithm '{name}'. Available: {self.available}"
        )
        self.name = name


class UnknownAdditionError(PatternKitError):
    """Raised when a coffee addition name is not recognised."""
    def __init__(self, name: str):
        super().__init__(f"Unknown coffee addition '{name}'")
        self.name = name
