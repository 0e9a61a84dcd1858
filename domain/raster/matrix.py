"""Raster Bounded Context - RasterMatrix.

A fixed-size 2-D grayscale raster whose pixel type is one of the supported
value domains (see value_domains.py).

Storage is a single owned numpy array of shape (rows, cols). No two matrices
share a grid: constructors copy their input and accessors return copies.

Every stored value stays inside [0, max_value]. Operators compute in float64
and saturate back into the domain instead of wrapping. Scalar operands are
first converted to the pixel type, so an int8 matrix times 0.5 multiplies by 0.

Binary operators on matrices of different shapes pad the smaller operand with
zeros up to the componentwise maximum extent. This differs from numpy
broadcasting on purpose and is observable behavior:

    a = RasterMatrix(2, 2, domain="bool") + True   # all True
    b = RasterMatrix(1, 1, domain="bool")          # [[False]]
    a * b                                          # 2x2, all False
"""

from __future__ import annotations

import logging
import numbers
import operator
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from domain.raster.config import RasterConfig
from domain.raster.errors import (
    DomainMismatchError,
    IndexOutOfRangeError,
    InvalidRasterError,
)
from domain.raster.ports import RandomSource
from domain.raster.random_source import BoundedRandomSource
from domain.raster.services import aligned_operands, disk_mask, render_text
from domain.raster.value_domains import ValueDomain, resolve_domain
from domain.raster.value_objects import Disk, MatrixShape

logger = logging.getLogger(__name__)

_BinaryOp = Callable[[NDArray[Any], Any], NDArray[Any]]


class RasterMatrix:
    """Grayscale image with a parameterized pixel value domain.

    Parameters
    ----------
    rows, cols: int
        Grid extent, both > 0. Fixed for the lifetime of the matrix.
    fill: bool
        If True every cell is an independent uniform draw over
        [0, max_value]; otherwise every cell is zero.
    domain:
        Value domain, or anything resolve_domain accepts ("bool", "int8",
        "int16", "float32", numpy dtypes, ``bool``, ``float``).
    random_source: RandomSource | None
        Source used when ``fill`` is True. Defaults to a fresh
        BoundedRandomSource over the whole domain.

    Raises:
        ValueError: If rows or cols is not positive
        UnsupportedTypeError: If domain is not a supported value domain
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        fill: bool = False,
        domain: Any = "int8",
        random_source: RandomSource | None = None,
    ) -> None:
        shape = MatrixShape(rows=rows, cols=cols)
        value_domain = resolve_domain(domain)

        if fill:
            source = random_source
            if source is None:
                source = BoundedRandomSource.for_domain(value_domain)
            draws = np.asarray(source.draw(shape.rows, shape.cols))
            if draws.shape != shape.as_tuple():
                raise InvalidRasterError(
                    f"Random source returned shape {draws.shape}, "
                    f"expected {shape.as_tuple()}"
                )
            grid = value_domain.saturate(draws)
        else:
            grid = np.zeros(shape.as_tuple(), dtype=value_domain.dtype)

        self._init_state(shape, value_domain, grid)
        logger.debug(
            "Created %dx%d %s matrix (fill=%s)",
            shape.rows,
            shape.cols,
            value_domain.name,
            fill,
        )

    def _init_state(
        self, shape: MatrixShape, domain: ValueDomain, grid: NDArray[Any]
    ) -> None:
        self._shape = shape
        self._domain = domain
        self._grid = grid

    @classmethod
    def _from_grid(cls, grid: NDArray[Any], domain: ValueDomain) -> "RasterMatrix":
        """Wrap an already-saturated grid without copying it."""
        matrix = cls.__new__(cls)
        matrix._init_state(
            MatrixShape(rows=grid.shape[0], cols=grid.shape[1]), domain, grid
        )
        return matrix

    # -----------------------------------------------------------------------
    # Alternate constructors
    # -----------------------------------------------------------------------
    @classmethod
    def from_config(cls, config: RasterConfig) -> "RasterMatrix":
        """Build a matrix from validated settings."""
        source = None
        if config.fill:
            source = BoundedRandomSource.for_domain(config.domain, seed=config.seed)
        return cls(
            config.rows,
            config.cols,
            fill=config.fill,
            domain=config.domain,
            random_source=source,
        )

    @classmethod
    def from_array(cls, array: ArrayLike, domain: Any = "int8") -> "RasterMatrix":
        """Build a matrix holding a copy of ``array``.

        Raises:
            InvalidRasterError: If array is not a non-empty 2-D grid of values
                inside the domain, or holds fractions for a bool or integer
                domain
            UnsupportedTypeError: If domain is not a supported value domain
        """
        value_domain = resolve_domain(domain)
        try:
            data = np.asarray(array, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidRasterError(f"Not a numeric grid: {e}") from e
        if data.ndim != 2:
            raise InvalidRasterError(f"Grid must be 2D, got {data.ndim}D")
        if data.shape[0] == 0 or data.shape[1] == 0:
            raise InvalidRasterError(f"Grid cannot be empty: {data.shape}")
        if not value_domain.contains(data):
            raise InvalidRasterError(
                f"Grid values must lie in [0, {value_domain.top}] "
                f"for domain {value_domain.name}"
            )
        if not value_domain.holds_exactly(data):
            raise InvalidRasterError(
                f"Grid values must be whole numbers for domain {value_domain.name}"
            )
        return cls._from_grid(value_domain.saturate(data), value_domain)

    # -----------------------------------------------------------------------
    # Properties
    # -----------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._shape.rows

    @property
    def cols(self) -> int:
        return self._shape.cols

    @property
    def shape(self) -> tuple[int, int]:
        return self._shape.as_tuple()

    @property
    def domain(self) -> ValueDomain:
        return self._domain

    @property
    def dtype(self) -> np.dtype:
        return self._domain.dtype

    @property
    def max_value(self) -> Any:
        """Upper bound of the value domain as a Python scalar."""
        return self._domain.top

    def copy(self) -> "RasterMatrix":
        return self._from_grid(self._grid.copy(), self._domain)

    def to_array(self) -> NDArray[Any]:
        """Return a copy of the grid."""
        return self._grid.copy()

    # -----------------------------------------------------------------------
    # Element access
    # -----------------------------------------------------------------------
    def _check_index(self, row: int, col: int) -> tuple[int, int]:
        row, col = operator.index(row), operator.index(col)
        if not self._shape.contains(row, col):
            raise IndexOutOfRangeError(row, col, self.shape)
        return row, col

    def at(self, row: int, col: int) -> Any:
        """Return the value at (row, col).

        Raises:
            IndexOutOfRangeError: If row >= rows or col >= cols (or negative)
        """
        row, col = self._check_index(row, col)
        return self._grid[row, col].item()

    def set(self, row: int, col: int, value: Any) -> None:
        """Store ``value`` at (row, col), saturated into the domain.

        Raises:
            IndexOutOfRangeError: If row >= rows or col >= cols (or negative)
        """
        row, col = self._check_index(row, col)
        self._grid[row, col] = self._domain.saturate(value)

    def __getitem__(self, key: tuple[int, int]) -> Any:
        row, col = self._unpack_key(key)
        return self.at(row, col)

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, col = self._unpack_key(key)
        self.set(row, col, value)

    @staticmethod
    def _unpack_key(key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"Index must be a (row, col) pair, got {key!r}")
        return key

    # -----------------------------------------------------------------------
    # Complement
    # -----------------------------------------------------------------------
    def complement_in_place(self) -> "RasterMatrix":
        """Replace every value v by max_value - v; return self for chaining."""
        inverted = self._domain.max_value - self._grid.astype(np.float64)
        self._grid[...] = self._domain.saturate(inverted)
        return self

    def complement(self) -> "RasterMatrix":
        """Return a new complemented matrix; self is unchanged."""
        return self.copy().complement_in_place()

    __invert__ = complement

    # -----------------------------------------------------------------------
    # Equality
    # -----------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RasterMatrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        if self._domain != other._domain:
            return False
        return bool(np.array_equal(self._grid, other._grid))

    __hash__ = None  # type: ignore[assignment]

    # -----------------------------------------------------------------------
    # Elementwise operators
    # -----------------------------------------------------------------------
    def _combine(
        self, other: Any, numeric_op: _BinaryOp, boolean_op: _BinaryOp
    ) -> "RasterMatrix":
        if isinstance(other, RasterMatrix):
            if other._domain != self._domain:
                raise DomainMismatchError(
                    f"Cannot combine {self._domain.name} and "
                    f"{other._domain.name} matrices"
                )
            if other.shape != self.shape:
                logger.debug(
                    "Padding operands %s and %s to common extent",
                    self.shape,
                    other.shape,
                )
            left, right = aligned_operands(self._grid, other._grid)
        elif isinstance(other, (numbers.Real, np.bool_)):
            left, right = self._grid, self._domain.operand(other)
        else:
            return NotImplemented

        if self._domain.is_boolean:
            result = boolean_op(left.astype(bool), np.asarray(right).astype(bool))
        else:
            result = numeric_op(
                left.astype(np.float64), np.asarray(right, dtype=np.float64)
            )
        return self._from_grid(self._domain.saturate(result), self._domain)

    def __mul__(self, other: Any) -> "RasterMatrix":
        """Elementwise product: logical AND for bool, saturated product otherwise."""
        return self._combine(other, np.multiply, np.logical_and)

    def __add__(self, other: Any) -> "RasterMatrix":
        """Elementwise sum: logical OR for bool, saturated sum otherwise."""
        return self._combine(other, np.add, np.logical_or)

    # Both operations are commutative, so scalar-on-the-left reuses them.
    __rmul__ = __mul__
    __radd__ = __add__

    # -----------------------------------------------------------------------
    # Density
    # -----------------------------------------------------------------------
    def fillability(self) -> float:
        """Fraction of the maximum possible total intensity, in [0, 1]."""
        total = float(self._grid.sum(dtype=np.float64))
        return total / (self._shape.size * self._domain.max_value)

    # -----------------------------------------------------------------------
    # Raster primitives
    # -----------------------------------------------------------------------
    def stamp_disk(
        self, center_row: float, center_col: float, radius: float, value: Any
    ) -> "RasterMatrix":
        """Overwrite every cell within ``radius`` of the center with ``value``.

        The center may be fractional or lie outside the grid, and the disk may
        extend past the edges; cells outside the grid are skipped.

        Raises:
            ValueError: If radius is negative or any argument is not finite
        """
        disk = Disk(center_row=center_row, center_col=center_col, radius=radius)
        mask = disk_mask(self._shape, disk)
        self._grid[mask] = self._domain.saturate(value)
        logger.debug(
            "Stamped disk at (%s, %s) r=%s: %d cells",
            disk.center_row,
            disk.center_col,
            disk.radius,
            int(mask.sum()),
        )
        return self

    # -----------------------------------------------------------------------
    # Representation
    # -----------------------------------------------------------------------
    def __str__(self) -> str:
        return render_text(self._grid)

    def __repr__(self) -> str:
        return (
            f"RasterMatrix(rows={self.rows}, cols={self.cols}, "
            f"domain={self._domain.name!r})"
        )
