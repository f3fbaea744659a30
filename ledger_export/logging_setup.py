"""
Logging configuration for the ``ledger_export`` package.

Library modules only call ``logging.getLogger(__name__)``. Entry points call
``configure_logging`` once to attach a handler to the package logger.
"""

import logging
import os
import sys


PACKAGE_LOGGER = 'ledger_export'
LEVEL_ENV = 'LEDGER_EXPORT_LOG_LEVEL'
DEFAULT_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'

_handler = None

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def parse_level(level, default=logging.WARNING):
    if level is None:
        level = os.getenv(LEVEL_ENV)
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
    return default


def configure_logging(level=None, stream=None):
    """
    Attach a single stream handler to the package logger. Later calls set
    the level and point the same handler at the current stream.
    """
    global _handler
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(parse_level(level))
    if stream is None:
        stream = sys.stderr
    if _handler is not None:
        _handler.setStream(stream)
        return
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)
    _handler = logging.StreamHandler(stream)
    _handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    logger.addHandler(_handler)
    logger.propagate = False
