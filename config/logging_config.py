"""
Centralized logging configuration.

Core modules log through ``logging.getLogger(__name__)``; entry points
(the API, scripts) call ``setup_logger`` once so those records reach the
console and the rotating log file.
"""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional
from .constants import (
    LOG_LEVEL, LOG_FORMAT, LOG_FILE,
    LOG_MAX_SIZE_MB, LOG_BACKUP_COUNT
)


def setup_logger(name: str = None, level: str = None,
                 log_file: Optional[str] = LOG_FILE) -> logging.Logger:
    """
    Get or create a configured logger.

    Usage:
        from config.logging_config import setup_logger
        logger = setup_logger(__name__)
        logger.info("Message here")

    Args:
        name: Logger name. If None, uses 'mathboard'.
        level: Level name overriding LOG_LEVEL.
        log_file: Rotating log file path, or None for console only.

    Returns:
        Configured logging.Logger instance.
    """
    logger = logging.getLogger(name or 'mathboard')

    # Handlers are attached once per logger name
    if logger.handlers:
        if level:
            set_level(logger, level)
        return logger

    set_level(logger, level or LOG_LEVEL)

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=LOG_MAX_SIZE_MB * 1024 * 1024,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8',
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger


def set_level(logger: logging.Logger, level: str) -> None:
    """Set a logger level from its name, falling back to INFO for unknown names."""
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))


def get_logger(name: str = None) -> logging.Logger:
    """
    Alias for setup_logger for convenience.

    Usage:
        from config.logging_config import get_logger
        logger = get_logger(__name__)
    """
    return setup_logger(name)


# Singleton logger for quick imports
logger = setup_logger('mathboard')
