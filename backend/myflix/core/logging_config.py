"""
Logging configuration.

The root logger writes to the console. Request lines go to the
``myflix.access`` logger, which appends to an access log file when one is
configured.
"""
import logging
from pathlib import Path
from typing import Optional

ACCESS_LOGGER_NAME = "myflix.access"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", access_log_file: Optional[str] = None) -> None:
    """
    Configure the root logger and the access logger.

    Safe to call more than once: handlers are only attached the first time.

    Args:
        level: Logging level name (case insensitive)
        access_log_file: Path of the append-mode access log, or None to
            keep request lines on the console only
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not root.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    access_logger = logging.getLogger(ACCESS_LOGGER_NAME)
    if access_log_file and not any(
        isinstance(h, logging.FileHandler) for h in access_logger.handlers
    ):
        file_handler = logging.FileHandler(
            Path(access_log_file).resolve(), mode="a", encoding="utf-8"
        )
        file_handler.setFormatter(logging.Formatter(fmt="%(asctime)s %(message)s", datefmt=DATE_FORMAT))
        access_logger.addHandler(file_handler)


def get_access_logger() -> logging.Logger:
    """Logger that receives one line per handled request."""
    return logging.getLogger(ACCESS_LOGGER_NAME)
