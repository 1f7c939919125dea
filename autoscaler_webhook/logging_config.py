"""
Logging setup.

Configured once per process: one stderr handler and, when enabled, one
rotating file handler on the package logger.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .constants import (
    LOG_BACKUP_COUNT,
    LOG_DIR,
    LOG_FILE,
    LOG_LEVEL,
    LOG_MAX_BYTES,
    LOG_TO_FILE,
)

PACKAGE_LOGGER = "autoscaler_webhook"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'

_logging_configured = False


def setup_logging(
    level: str = LOG_LEVEL,
    log_to_file: bool = LOG_TO_FILE,
    log_dir: str = LOG_DIR,
    log_file: str = LOG_FILE,
    max_bytes: int = LOG_MAX_BYTES,
    backup_count: int = LOG_BACKUP_COUNT,
) -> logging.Logger:
    """
    Configure the package logger. Repeated calls are no-ops.

    Args:
        level: log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: also write to a rotating file in ``log_dir``
        log_dir: log directory, created when missing
        log_file: log file name
        max_bytes: size of one log file before rotation
        backup_count: number of rotated files kept

    Returns:
        logging.Logger: the configured package logger
    """
    global _logging_configured
    logger = logging.getLogger(PACKAGE_LOGGER)
    if _logging_configured:
        return logger

    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)
    logger.propagate = False
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    if log_to_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path / log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8',
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    _logging_configured = True
    return logger
