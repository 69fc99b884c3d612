#!/usr/bin/env python3
"""Centralized logging utilities with consistent formatting."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

# Global configuration
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_DEFAULT_LEVEL = logging.INFO
_CONFIGURED_LOGGERS: set[str] = set()


def setup_logger(
    name: str,
    level: int | None = None,
    format_string: str | None = None,
    stream: Any = None,
) -> logging.Logger:
    """Set up a logger with consistent formatting.

    Args:
        name: Logger name (typically __name__)
        level: Logging level (default: INFO)
        format_string: Custom format string (optional)
        stream: Output stream (default: sys.stdout)

    Returns:
        Configured logger instance

    Example:
        >>> from localekit.core.logging_utils import setup_logger
        >>> logger = setup_logger(__name__)
        >>> logger.info("Translations loaded")
    """
    logger = logging.getLogger(name)

    # Only configure once per logger name
    if name in _CONFIGURED_LOGGERS:
        return logger

    if level is None:
        level = _DEFAULT_LEVEL
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        formatter = logging.Formatter(
            format_string or _LOG_FORMAT,
            datefmt=_LOG_DATE_FORMAT,
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Prevent propagation to root logger (avoid duplicate logs)
    logger.propagate = False

    _CONFIGURED_LOGGERS.add(name)

    return logger


def set_global_log_level(level: int | str):
    """Set log level for all configured loggers.

    Args:
        level: Logging level (e.g., logging.DEBUG or "DEBUG")
    """
    global _DEFAULT_LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    _DEFAULT_LEVEL = level

    for logger_name in _CONFIGURED_LOGGERS:
        logging.getLogger(logger_name).setLevel(level)


def configure_file_logging(
    log_file: str | Path,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 3,
):
    """Attach a rotating file handler to every configured logger.

    Args:
        log_file: Path of the log file (parent directories are created)
        max_bytes: Maximum file size before rotation
        backup_count: Number of backup files to keep
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT))

    for logger_name in _CONFIGURED_LOGGERS:
        logger = logging.getLogger(logger_name)
        has_file_handler = any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
        if not has_file_handler:
            logger.addHandler(file_handler)


def configure_logging(logging_config: dict[str, Any], base_dir: str | Path | None = None):
    """Apply the ``logging`` config section.

    Args:
        logging_config: Dict with ``level``, ``file``, ``max_size_mb``, ``backup_count``
        base_dir: Directory a relative ``file`` is resolved against (default: cwd)
    """
    set_global_log_level(logging_config.get("level", "INFO"))
    log_file = logging_config.get("file")
    if log_file:
        log_file = Path(log_file)
        if base_dir is not None and not log_file.is_absolute():
            log_file = Path(base_dir) / log_file
        configure_file_logging(
            log_file,
            max_bytes=int(logging_config.get("max_size_mb", 10) * 1024 * 1024),
            backup_count=logging_config.get("backup_count", 3),
        )


def log_event(
    logger: logging.Logger,
    event_name: str,
    data: dict[str, Any] | None = None,
):
    """Log a structured event.

    Args:
        logger: Logger instance
        event_name: Event name (e.g., 'language_switched')
        data: Optional event data

    Example:
        >>> log_event(logger, "language_switched", {"from": "English", "to": "Spanish"})
    """
    data_str = ""
    if data:
        data_str = " " + " ".join(f"{k}={v}" for k, v in data.items())
    logger.info(f"[EVENT] {event_name}{data_str}")
