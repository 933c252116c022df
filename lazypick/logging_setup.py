"""Logging sink configuration.

Logging is off unless a sink path is given; the terminal itself is owned by
the chooser, so log records never go to stderr while a session runs.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "lazypick"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(path: str | None) -> logging.Logger:
    """Route package logs to ``path`` or silence them.

    Raises ``OSError`` when the sink cannot be opened.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False
    if not path:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.CRITICAL)
        return logger
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger
