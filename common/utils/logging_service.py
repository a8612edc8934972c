import logging
import os
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("catalog")


def configure_logging(level=None) -> logging.Logger:
    """
    Sets up the shared "catalog" logger writing to stdout. Calling it more
    than once only updates the level.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "DEBUG").upper()

    logger.setLevel(level)

    if not logger.handlers:  # avoid duplicate handlers on app re-creation
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.propagate = False
    return logger


configure_logging()
