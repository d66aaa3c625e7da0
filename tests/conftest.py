"""Pytest configuration and shared fixtures for Graph Conduit tests.

This module provides:
- A deterministic numpy RNG fixture for randomised graph tests
- A fixture restoring the global debug-mode switch after each test
"""

import os
from typing import Iterator

import numpy as np
import pytest

from graphconduit.diagnostics import is_debug_enabled, set_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode() -> Iterator[None]:
    """Auto-use fixture so a test toggling debug mode cannot leak into others."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)
