"""Logging configuration for the orbit tools."""

import logging
import sys
from typing import Optional, TextIO

FORMATS = {
    "structured": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    "plain": '%(levelname)s - %(message)s',
}


def setup_logging(level: str = "INFO", format_type: str = "structured",
                  stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Send log records to ``stream`` (stdout by default) and return the
    ``orbit_core`` logger.

    Any handlers already on the root logger are replaced.
    """
    if format_type not in FORMATS:
        raise ValueError(f"Unknown log format: {format_type}")
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(FORMATS[format_type]))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    logger = logging.getLogger('orbit_core')
    logger.setLevel(log_level)
    return logger
