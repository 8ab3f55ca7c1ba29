# server/core/logger.py

import logging
import sys


LOGGER_NAME = "acme_store"

logger = logging.getLogger(LOGGER_NAME)


def setup_logger(level: str = "INFO") -> logging.Logger:
    """
    Configures the application logger once per process.
    Messages stay on this logger and are written to stdout.
    """
    logger.setLevel(level.upper())
    logger.propagate = False

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s (%(filename)s:%(lineno)d)'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    return logger.getChild(name)
