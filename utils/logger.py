"""Logging configuration."""

import logging
import sys
from typing import Optional
from config.settings import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def resolve_level(level_name: Optional[str] = None) -> int:
    """Map a level name such as ``"debug"`` to its logging constant.

    Unknown names fall back to INFO rather than failing at import time.
    """
    level = getattr(logging, (level_name or settings.log_level).upper(), None)
    return level if isinstance(level, int) else logging.INFO


def setup_logger(name: str = __name__, level_name: Optional[str] = None) -> logging.Logger:
    """Set up a stdout logger for an exercise tracker module.

    Calling it again for the same name updates the level but never adds a
    second handler.
    """
    logger = logging.getLogger(name)
    level = resolve_level(level_name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
