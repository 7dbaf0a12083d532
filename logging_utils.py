"""
Logging helpers shared by the generator and the validation harness.

Usage:

    from logging_utils import get_logger

    logger = get_logger(__name__)
    logger.info("Something happened")
"""

from __future__ import annotations

import logging
from logging import Logger
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Один и тот же логгер на одно имя
_LOGGER_CACHE: dict[str, Logger] = {}


def configure_root_logger(level: int = logging.INFO) -> None:
    """
    Configure the root logger once, writing to stderr so the report on
    stdout stays clean. If the root logger already has handlers only the
    level is adjusted.
    """
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    logging.basicConfig(level=level, handlers=[handler])


def get_logger(name: Optional[str] = None, level: Optional[int] = None) -> Logger:
    """
    Get a cached logger. Without an explicit level the logger inherits
    the root configuration.
    """
    if name is None:
        name = "__main__"

    if name in _LOGGER_CACHE:
        return _LOGGER_CACHE[name]

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)

    _LOGGER_CACHE[name] = logger
    return logger
