# -*- coding: utf-8 -*-
"""Logging utilities."""
import logging
import os
import sys
from typing import Optional, Union

_FORMAT = "%(levelname)s %(asctime)s [%(filename)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%m-%d %H:%M:%S"

LOG_LEVEL_ENV = "SUDOKU_ENGINE_LOG_LEVEL"


class NewLineFormatter(logging.Formatter):
    """Adds logging prefix to newlines to align multi-line messages."""

    def __init__(self, fmt, datefmt=None):
        logging.Formatter.__init__(self, fmt, datefmt)

    def format(self, record):
        msg = logging.Formatter.format(self, record)
        if record.message != "":
            parts = msg.split(record.message)
            msg = msg.replace("\n", "\r\n" + parts[0])
        return msg


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Invalid log level: {level}")
        return resolved
    return level


def get_logger(name: Optional[str] = None, level: Union[int, str, None] = None) -> logging.Logger:
    """
    Get a logger with the given name and level.

    Args:
        name (Optional[str]): The name of the logger.
        level (Union[int, str, None]): The logging level. Falls back to the
            `SUDOKU_ENGINE_LOG_LEVEL` environment variable, then INFO.

    Returns:
        logging.Logger: The logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(level))
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(NewLineFormatter(_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def set_log_level(level: Union[int, str]) -> None:
    """Apply `level` to every logger already created under the package namespace."""
    resolved = _resolve_level(level)
    for name in list(logging.root.manager.loggerDict):
        if name == "sudoku_engine" or name.startswith("sudoku_engine."):
            logging.getLogger(name).setLevel(resolved)
