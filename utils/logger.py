"""
utils/logger.py
---------------
Centralized logging configuration.
All modules should use `get_logger(__name__)` to obtain a logger instance.
Host applications may call `configure_logging()` first to pick the level
and output stream; otherwise LOG_LEVEL and stdout are used.
"""

import logging
import sys
from typing import Optional, TextIO

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """
    Attach the shared handler to the root logger, replacing any handler
    installed by an earlier call.

    Args:
        level: Level name such as "DEBUG"; defaults to LOG_LEVEL.
        stream: Output stream; defaults to stdout.
    """
    global _handler
    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler(stream or sys.stdout)
    _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root.addHandler(_handler)
    root.setLevel(getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance, configuring logging on first use.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A configured logging.Logger.
    """
    if _handler is None:
        configure_logging()
    return logging.getLogger(name)
