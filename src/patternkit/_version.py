"""Version information for patternkit."""

__version__ = "1.0.0"
