"""
Logging for tonegrid.

Every module logs to a child of the "tonegrid" logger: tuning imports at
INFO/ERROR, map fallbacks at DEBUG, lenient-mode problems at WARNING. The
library installs no handlers itself; the CLI, or an application that
embeds tonegrid, calls set_global_logging() once.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and tonegrid contributors

MIT License
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "tonegrid"


def set_global_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Send tonegrid's log records to stdout and, optionally, a file.

    Args:
        level: Level name; unknown names fall back to INFO
        format_string: Record format (default: time, logger, level, message)
        log_file: Also append records to this file

    Returns:
        The "tonegrid" logger
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=format_string,
        handlers=handlers,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(log_level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for a tonegrid module, usually get_logger(__name__)."""
    return logging.getLogger(name or ROOT_LOGGER_NAME)
