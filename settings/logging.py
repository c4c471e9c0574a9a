"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}"


def setup_logging(level: str | None = None, to_file: bool = True):
    """Console sink at `level` (LOG_LEVEL by default), plus a daily debug log file."""
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level or LOG_LEVEL, colorize=True)

    if to_file:
        LOG_DIR.mkdir(exist_ok=True)
        logger.add(
            LOG_DIR / "policy_space_{time:YYYY-MM-DD}.log",
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
        )
        logger.debug("Logging to {}", LOG_DIR)

    return logger
