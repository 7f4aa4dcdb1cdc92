# SPDX-License-Identifier: MIT

import logging
import sys

LOGGER_NAME = "weekgrid"
LOG_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def setup_logger(level: str = "WARNING") -> logging.Logger:
    """Configure the package logger once; later calls only change the level."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
