"""Console logging shared by the Up client, exporter and CLI."""
import logging
import os
import sys

ROOT_LOGGER = "upbank"


def _level_from_env() -> int:
    # LOG_LEVEL=DEBUG shows every request the client sends
    return getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Return the ``upbank`` logger or one of its children.

    The stdout handler lives on ``upbank`` alone; ``upbank.client`` and
    ``upbank.export`` reach it through propagation.
    """
    logger = logging.getLogger(name)
    if name != ROOT_LOGGER or logger.handlers:
        return logger

    level = _level_from_env()
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.setLevel(level)
    logger.addHandler(handler)
    return logger
