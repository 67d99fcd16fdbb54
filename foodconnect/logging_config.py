"""Centralized logging configuration for the ledger."""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from foodconnect.core.config import settings

# Define log format
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "foodconnect"


class LedgerFormatter(logging.Formatter):
    """Formatter that appends the `details` passed through `extra=` by rejected operations."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        details = getattr(record, "details", None)
        if details:
            message = f"{message} | details={details}"
        return message


def setup_logging(log_level: str = settings.log_level, log_dir: str = settings.log_dir) -> logging.Logger:
    """
    Set up package-wide logging configuration.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory that receives app.log and error.log

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, log_level.upper()))

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    path = Path(log_dir)
    path.mkdir(parents=True, exist_ok=True)
    formatter = LedgerFormatter(LOG_FORMAT, DATE_FORMAT)

    # Console handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)

    # File handler - general log (rotating)
    file_handler = RotatingFileHandler(
        path / "app.log",
        maxBytes=settings.log_max_bytes,
        backupCount=settings.log_backup_count,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    # File handler - error log (rotating)
    error_handler = RotatingFileHandler(
        path / "error.log",
        maxBytes=settings.log_max_bytes,
        backupCount=settings.log_backup_count,
        encoding="utf-8"
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)
    logger.addHandler(error_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Child of the package logger, e.g. `foodconnect.services`."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


# Initialize default logger
logger = setup_logging()
