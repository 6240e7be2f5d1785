"""Logging configuration."""

import logging
import sys
from typing import Optional
from config.settings import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(name: str = __name__, level: Optional[str] = None) -> logging.Logger:
    """Set up a stdout logger for a module.

    The level defaults to ``settings.log_level``.
    """
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        # uvicorn installs its own root handlers
        logger.propagate = False

    return logger
