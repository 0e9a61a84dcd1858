"""Pytest configuration for raster domain tests.

Provides a deterministic RandomSource double so construction tests can check
exactly which values land in the grid.
"""

from __future__ import annotations

import numpy as np
import pytest


class FixedRandomSource:
    """RandomSource that always returns the same value.

    Records every draw request so tests can assert on the construction burst.
    """

    def __init__(self, value: float) -> None:
        self.value = value
        self.requests: list[tuple[int, int]] = []

    def next(self) -> float:
        return self.value

    def draw(self, rows: int, cols: int) -> np.ndarray:
        self.requests.append((rows, cols))
        return np.full((rows, cols), self.value, dtype=np.float64)


@pytest.fixture
def fixed_source_factory():
    """Factory fixture: fixed_source_factory(value) -> FixedRandomSource."""
    return FixedRandomSource
