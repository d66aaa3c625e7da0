"""Debug mode management for Graph Conduit.

When debug mode is on, graph queries verify their own results (spanning
forest shape for MSTs, edge chaining for shortest paths) before returning
them. The checks cost an extra pass over the graph, so they are off by
default.

The switch is seeded from the ``GRAPHCONDUIT_DEBUG`` environment variable
at import time. Unrecognised values leave debug mode off and log a warning
naming the value.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Callable, Iterator

from ..logging import get_logger

logger = get_logger(__name__)

_DEBUG_ENV_VAR = "GRAPHCONDUIT_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"", "0", "false", "no", "off"})


def _flag_from_env(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value not in _FALSY:
        logger.warning("Ignoring %s=%r; expected one of 1/0, true/false, yes/no, on/off", _DEBUG_ENV_VAR, raw)
    return False


_debug_enabled: bool = _flag_from_env(os.getenv(_DEBUG_ENV_VAR, ""))


def is_debug_enabled() -> bool:
    """Return whether Graph Conduit debug mode is currently enabled."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable Graph Conduit debug mode.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily enable or disable debug mode.

    The previous setting is restored on exit, even if the block raises.

    Example
    -------
    >>> with debug_context(True):
    ...     mst = graph.find_minimum_spanning_tree()  # result is verified
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev


def run_debug_check(name: str, check: Callable[..., Any], *args: Any) -> bool:
    """
    Run a result check only while debug mode is on.

    Parameters
    ----------
    name:
        Label used in the log record, e.g. ``"minimum spanning tree"``.
    check:
        Callable that raises if the result is wrong.
    *args:
        Arguments passed to check.

    Returns
    -------
    bool
        True if the check ran, False if debug mode is off.
    """
    if not _debug_enabled:
        return False
    logger.debug("Verifying %s", name)
    check(*args)
    return True
