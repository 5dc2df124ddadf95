"""Package logger configuration for command-line runs."""

from __future__ import annotations

import logging

LOGGER_NAME = "dirtree"


def setup_logger(level: str = "WARNING", name: str = LOGGER_NAME) -> logging.Logger:
    """Attach one stderr handler to the package logger and set its level.

    Repeated calls only adjust the level, so tests and re-entrant ``main``
    invocations never stack duplicate handlers.
    """
    log = logging.getLogger(name)
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        log.addHandler(handler)
    log.setLevel(level)
    return log
