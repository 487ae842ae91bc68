"""Logging setup for scripts using wksubjects."""

import logging
from typing import Optional

from ..config import Config

LOG_FORMAT = "%(levelname)8s %(name)s | %(message)s"


def setup_logger(name: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
    """
    Configure root logging once and return a named logger.

    Library modules only call ``logging.getLogger(__name__)``; entry points
    call this to attach a handler.

    Args:
        name: Logger name (root logger if None)
        level: Level name, defaults to Config.LOG_LEVEL. Unknown names
            fall back to INFO.
    """
    level_value = logging.getLevelName((level or Config.LOG_LEVEL).upper())
    if not isinstance(level_value, int):
        level_value = logging.INFO
    logging.basicConfig(level=level_value, format=LOG_FORMAT)
    logging.getLogger().setLevel(level_value)
    return logging.getLogger(name)
