"""Logging setup for the analogue clock."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

ROOT_LOGGER = "analogue_clock"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configured = False


def _parse_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    max_bytes: int = 5_000_000,  # 5MB
    backup_count: int = 2,
) -> logging.Logger:
    """
    Configure the package logger with console and optional file output.

    Calling this again after the first setup only changes the level, so a
    config reload can turn DEBUG tick logging on or off without duplicating
    handlers.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a rotating log file
        max_bytes: Max size per log file before rotation
        backup_count: Number of rotated files to keep

    Returns:
        The analogue_clock package logger
    """
    global _configured

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(_parse_level(level))

    if _configured:
        return logger

    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(file_handler)

    # Keep tick chatter out of the host's root logger
    logger.propagate = False

    _configured = True
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger of the package logger.

    Args:
        name: Dotted module name (e.g., "engine.tracker")

    Returns:
        Logger instance
    """
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
