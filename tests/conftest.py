"""
Shared test configuration.

Process-wide singletons are swapped out per test with monkeypatch so every
test starts from an unset state and the real state is restored afterwards.
"""

import os
import sys

import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from patternkit.factory.registry import LogisticsRegistry  # noqa: E402
from patternkit.infrastructure.logging.logger import teardown_logging  # noqa: E402
from patternkit.infrastructure.patterns.singleton_registry import SingletonRegistry  # noqa: E402
from patternkit.singleton.database import Database  # noqa: E402
from patternkit.strategy.registry import CompressionStrategyRegistry  # noqa: E402


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep configuration environment variables out of the tests."""
    monkeypatch.delenv("PATTERNKIT_CONFIG", raising=False)
    monkeypatch.delenv("PATTERNKIT_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def fresh_singletons(monkeypatch):
    """Start every test with no singleton instances created."""
    monkeypatch.setattr(Database, "_instance", None)
    monkeypatch.setattr(SingletonRegistry, "_instance", None)
    monkeypatch.setattr(LogisticsRegistry, "_instance", None)
    monkeypatch.setattr(CompressionStrategyRegistry, "_instance", None)


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop handlers installed by setup_logging during a test."""
    yield
    teardown_logging()


@pytest.fixture
def config_file(tmp_path):
    """Write a configuration dictionary to a temporary JSON file."""
    import json

    def _write(data, name="patternkit.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    return _write
