"""Raster Bounded Context - Error Hierarchy.

Custom exceptions for raster matrix operations.
"""

from __future__ import annotations


class RasterError(Exception):
    """Base error for raster operations."""


class UnsupportedTypeError(RasterError, TypeError):
    """Element type has no defined value domain (no maximum value)."""


class DomainMismatchError(RasterError):
    """Binary operation between matrices of different value domains."""


class InvalidRasterError(RasterError):
    """Input array cannot be used as a raster grid."""


class IndexOutOfRangeError(RasterError, IndexError):
    """Cell index is outside the matrix grid.

    Attributes:
        row: The offending row index
        col: The offending column index
        shape: The matrix (rows, cols)
    """

    def __init__(self, row: int, col: int, shape: tuple[int, int]) -> None:
        self.row = row
        self.col = col
        self.shape = shape
        super().__init__(
            f"Index ({row}, {col}) out of range for {shape[0]}x{shape[1]} matrix"
        )
