"""Structured logging setup built on structlog and the standard logging module."""
import logging
import os
import sys
import threading
from logging.handlers import RotatingFileHandler
from typing import List, Optional

import structlog

from patternkit.config.schemas.logging_schema import LoggingConfig

_configured = False
_installed_handlers: List[logging.Handler] = []
_configure_lock = threading.Lock()


class DetailedFormatter(logging.Formatter):
    """Formatter that includes caller information."""

    def format(self, record: logging.LogRecord) -> str:
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def _build_handlers(config: LoggingConfig) -> List[logging.Handler]:
    log_format = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"
    handlers: List[logging.Handler] = []

    if config.destination in ("file", "both"):
        log_dir = os.path.dirname(os.path.expandvars(config.file_path))
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.expandvars(config.file_path),
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(DetailedFormatter(log_format))
        handlers.append(file_handler)

    if config.destination in ("console", "both"):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(DetailedFormatter(log_format))
        handlers.append(console_handler)

    return handlers


def _configure_structlog(json_format: bool) -> None:
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. If None, defaults are used.

    Returns:
        Configured structlog logger instance.
    """
    global _configured

    if config is None:
        config = LoggingConfig()

    with _configure_lock:
        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, config.level))

        # Replace handlers installed by a previous call, leave foreign ones alone
        for handler in _installed_handlers:
            root_logger.removeHandler(handler)
            handler.close()
        _installed_handlers[:] = _build_handlers(config)
        for handler in _installed_handlers:
            root_logger.addHandler(handler)

        _configure_structlog(config.json_format)
        _configured = True

    logger = structlog.get_logger("patternkit")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger.

    structlog is routed through the standard logging module on first use so
    that records reach whatever handlers the host application installed.

    Args:
        name: Logger name, usually ``__name__``

    Returns:
        Bound structlog logger
    """
    global _configured
    if not _configured:
        with _configure_lock:
            if not _configured:
                _configure_structlog(json_format=False)
                _configured = True
    return structlog.get_logger(name)


def teardown_logging() -> None:
    """Remove and close the handlers installed by ``setup_logging``."""
    with _configure_lock:
        root_logger = logging.getLogger()
        for handler in _installed_handlers:
            root_logger.removeHandler(handler)
            handler.close()
        _installed_handlers.clear()
