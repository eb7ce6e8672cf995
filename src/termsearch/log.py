"""
Logging setup for applications embedding termsearch.

The library itself only logs through ``logging.getLogger(__name__)`` and never
installs handlers on import.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import get_settings

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the ``termsearch`` logger.

    Args:
        level: Logging level name; defaults to TERMSEARCH_LOG_LEVEL
        log_file: Optional log file path
        format_string: Optional custom format string

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("termsearch")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    if level is None:
        level = get_settings().log_level
    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
