"""Logging utilities for Graph Conduit.

Every module of the package obtains its logger through :func:`get_logger`, so
the whole library can be silenced or made verbose from a single place. The
algorithms only ever log at DEBUG level; nothing is printed unless a caller
lowers the level.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

_ROOT_NAME = "graphconduit"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Defaults applied to loggers created from now on
_DEFAULT_LEVEL = logging.WARNING
_default_stream: Optional[IO[str]] = None
_default_format = _DEFAULT_FORMAT

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _make_handler(level: int, stream: IO[str], fmt: str) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached so that each one receives exactly one handler. Names
    are placed under the ``graphconduit`` namespace, so ``get_logger("mst")``
    and ``get_logger("graphconduit.mst")`` return the same object.

    Args:
        name: Logger name (typically ``__name__``). If None, returns the
            package root logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from graphconduit.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("accepted edge %s", edge)
    """
    if name is None:
        name = _ROOT_NAME

    if name == _ROOT_NAME or name.startswith(_ROOT_NAME + "."):
        logger_name = name
    else:
        logger_name = f"{_ROOT_NAME}.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        stream = sys.stderr if _default_stream is None else _default_stream
        logger.addHandler(_make_handler(_DEFAULT_LEVEL, stream, _default_format))
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the logging level for all Graph Conduit loggers.

    Args:
        level: Logging level (``logging.DEBUG``, ``logging.INFO``, ...) or its
            name as a string (``"DEBUG"``, ``"INFO"``, ...). Unknown names
            fall back to WARNING.

    Example:
        >>> import logging
        >>> from graphconduit.logging import set_log_level
        >>> set_log_level(logging.DEBUG)
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Configure logging for Graph Conduit.

    Replaces the handlers of every logger created so far and changes the
    default used for loggers created later. Typically called once at
    application startup.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses
            ``[LEVEL] name: message``.
        stream: Output stream (default: ``sys.stderr``).

    Example:
        >>> import logging
        >>> from graphconduit.logging import configure_logging
        >>> configure_logging(level=logging.DEBUG)
    """
    global _DEFAULT_LEVEL, _default_stream, _default_format
    level = _coerce_level(level)
    _default_stream = stream
    stream = sys.stderr if stream is None else stream
    fmt = _DEFAULT_FORMAT if format_string is None else format_string

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(_make_handler(level, stream, fmt))

    _DEFAULT_LEVEL = level
    _default_format = fmt
