"""Diagnostics and debugging utilities for Graph Conduit."""

from .core import (
    assert_spanning_forest,
    assert_valid_path,
    is_spanning_forest,
    is_valid_path,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    run_debug_check,
    set_debug_enabled,
)

__all__ = [
    "is_spanning_forest",
    "assert_spanning_forest",
    "is_valid_path",
    "assert_valid_path",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "run_debug_check",
]
