"""Package logger: one stdout handler on "fpcore", children per module."""

import logging
import sys

from fpcore.config import get_settings

__all__ = ["logger", "setup_logger", "get_logger"]

FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level_number(level: str) -> int:
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise ValueError(f"unknown log level: {level!r}")
    return number


def setup_logger(name: str = "fpcore", level: str | None = None) -> logging.Logger:
    """Logger `name` writing to stdout, configured on first call only.

    level defaults to the LOG_LEVEL setting.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(_level_number(level or get_settings().log_level))
    logger.propagate = False
    return logger


def get_logger(module: str) -> logging.Logger:
    """Child of the package logger, e.g. get_logger("fpcore.boundary") -> fpcore.boundary."""
    return logger.getChild(module.rsplit(".", 1)[-1])


logger = setup_logger()
