"""Compression strategies and the compressor context that holds one."""

from abc import ABC, abstractmethod

from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class CompressionStrategy(ABC):
    """Interchangeable compression algorithm."""

    @abstractmethod
    def compress(self, file_path: str) -> str:
        """Compress a file and return a message describing what ran."""


class ZipCompression(CompressionStrategy):
    def compress(self, file_path: str) -> str:
        message = f"Compressing {file_path} using ZIP compression."
        logger.info(message)
        return message


class RarCompression(CompressionStrategy):
    def compress(self, file_path: str) -> str:
        message = f"Compressing {file_path} using RAR compression."
        logger.info(message)
        return message


class Compressor:
    """
    Context delegating compression to the strategy it holds.

    Errors raised by the strategy propagate to the caller unchanged.
    """

    def __init__(self, compression_strategy: CompressionStrategy):
        self._compression_strategy = compression_strategy

    @property
    def strategy(self) -> CompressionStrategy:
        """Strategy currently in use."""
        return self._compression_strategy

    def set_strategy(self, compression_strategy: CompressionStrategy) -> None:
        """Swap the strategy used by subsequent calls."""
        logger.debug(
            f"Switching compression strategy from {type(self._compression_strategy).__name__} "
            f"to {type(compression_strategy).__name__}"
        )
        self._compression_strategy = compression_strategy

    def compress_file(self, file_path: str) -> str:
        """Compress a file with the held strategy."""
        return self._compression_strategy.compress(file_path)
