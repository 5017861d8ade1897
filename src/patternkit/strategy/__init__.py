"""Strategy example: a compressor with pluggable algorithms."""

from .compression import CompressionStrategy, Compressor, RarCompression, ZipCompression
from .registry import CompressionStrategyRegistry, get_strategy_registry

__all__ = [
    "CompressionStrategy",
    "ZipCompression",
    "RarCompression",
    "Compressor",
    "CompressionStrategyRegistry",
    "get_strategy_registry",
]
