"""Root pytest configuration for all tests.

Provides small, deterministic fixtures shared by the raster domain tests and
the infrastructure adapter tests. Matrices are built directly from numpy
arrays so tests never depend on random fill unless they ask for a seed.
"""

import numpy as np
import pytest

from domain.raster.matrix import RasterMatrix

# Seed for every randomized fixture (reproducible failures)
TEST_SEED = 42


@pytest.fixture
def rng() -> np.random.Generator:
    """Fresh seeded numpy Generator for each test."""
    return np.random.default_rng(TEST_SEED)


@pytest.fixture
def zero_int8_3x3() -> RasterMatrix:
    """3x3 zero-filled int8 matrix (max_value 127)."""
    return RasterMatrix(3, 3, fill=False, domain="int8")


@pytest.fixture
def known_int8_2x2() -> RasterMatrix:
    """2x2 int8 matrix with known values [[0, 27], [127, 100]]."""
    return RasterMatrix.from_array([[0, 27], [127, 100]], domain="int8")
