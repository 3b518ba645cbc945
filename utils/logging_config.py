"""
Configure simple logging for the selector tools.
"""

import logging
import sys
from typing import Union


def configure_logging(level: Union[int, str] = logging.INFO):
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger = logging.getLogger()
    logger.setLevel(level)
    ch = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    ch.setFormatter(formatter)
    logger.handlers = [ch]
