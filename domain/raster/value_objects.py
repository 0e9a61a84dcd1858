"""Raster Bounded Context - Value Objects.

Immutable geometry describing matrix extents and raster primitives.
All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MatrixShape(BaseModel):
    """Fixed extent of a raster matrix (Value Object).

    Invariants:
        rows > 0
        cols > 0
    """

    rows: int = Field(gt=0)
    cols: int = Field(gt=0)

    model_config = ConfigDict(frozen=True)

    @property
    def size(self) -> int:
        """Number of cells."""
        return self.rows * self.cols

    def as_tuple(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def contains(self, row: int, col: int) -> bool:
        """Check if (row, col) addresses a cell of this shape."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def union(self, other: "MatrixShape") -> "MatrixShape":
        """Componentwise maximum of two shapes."""
        return MatrixShape(
            rows=max(self.rows, other.rows), cols=max(self.cols, other.cols)
        )


class Disk(BaseModel):
    """Filled disk in grid coordinates (Value Object).

    The center may be fractional, negative, or outside any particular grid;
    only the radius is constrained.

    Invariants:
        radius >= 0
        center and radius are finite
    """

    center_row: float
    center_col: float
    radius: float = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_finite(self) -> "Disk":
        for name in ("center_row", "center_col", "radius"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite, got {getattr(self, name)}")
        return self

    @property
    def radius_squared(self) -> float:
        return self.radius * self.radius
