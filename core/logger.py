"""
Logger factory shared by every module.

Verbosity follows ``settings.environment`` unless ``LOG_LEVEL`` is set:
  * ``"development"`` -> DEBUG
  * ``"production"``  -> WARNING
  * anything else     -> INFO
"""
import logging
import sys
from typing import Optional

from core.config import settings

_ENV_LEVEL_MAP = {
    "development": logging.DEBUG,
    "production": logging.WARNING,
}


def _default_level() -> int:
    if settings.LOG_LEVEL:
        return logging.getLevelName(settings.LOG_LEVEL.upper())
    return _ENV_LEVEL_MAP.get(settings.environment, logging.INFO)


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Return a named logger writing to stdout with a standard format.

    Args:
        name:  Usually ``__name__`` of the calling module.
        level: Explicit level override, otherwise derived from settings.
    """
    resolved_level = level if level is not None else _default_level()
    logger = logging.getLogger(name)

    # Don't stack handlers when a module asks twice
    if not logger.handlers:
        logger.setLevel(resolved_level)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(resolved_level)
        console_handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(console_handler)
        logger.propagate = False

    return logger
