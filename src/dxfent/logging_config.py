"""Logging setup for the dxfent command line.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached here, once, by the program that owns the process.  Console
output goes to stderr so that stdout carries only the paths of the
written DXF files.
"""

import logging
import sys
from typing import Optional, Union

CONSOLE_FORMAT = '%(levelname)s %(name)s: %(message)s'
FILE_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def _level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError('unknown log level: {!r}'.format(level))
    return value


def setup_logging(level: Union[int, str] = logging.INFO,
                  log_file: Optional[str] = None) -> logging.Logger:
    """Attach console and optional file handlers to the ``dxfent`` logger.

    Calling it again replaces the handlers of the previous call.  The
    file handler records every message at ``level`` or above, with
    timestamps, and appends to an existing file.
    """
    logger = logging.getLogger("dxfent")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    value = _level(level)
    logger.setLevel(value)
    logger.propagate = False

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    logger.debug("logging at %s", logging.getLevelName(value))
    return logger
