"""
Logging helpers shared across the package.

Every module asks for a named child of the "triplestore" logger. The package
logger stays silent until set_global_log_level() installs a handler.
"""

import logging
import sys
from typing import Union

ROOT_LOGGER_NAME = "triplestore"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_root = logging.getLogger(ROOT_LOGGER_NAME)
_root.addHandler(logging.NullHandler())
_stream_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Return the package logger for a component, e.g. get_logger("TripleStore")."""
    return _root.getChild(name)


def set_global_log_level(level: Union[int, str]) -> None:
    """
    Set the level of every package logger and make sure output reaches stderr.

    Args:
        level: A logging level number or name such as "DEBUG"
    """
    global _stream_handler
    if isinstance(level, str):
        level = level.upper()
    _root.setLevel(level)
    # Always bind to the current sys.stderr
    if _stream_handler is not None:
        _root.removeHandler(_stream_handler)
    _stream_handler = logging.StreamHandler(sys.stderr)
    _stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    _root.addHandler(_stream_handler)
