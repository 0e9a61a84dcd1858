"""Raster Bounded Context - Domain Services.

Pure grid helpers shared by RasterMatrix operators.
NO I/O operations - writing rendered text to streams lives in
`src/infrastructure/raster/text_writer.py`.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from domain.raster.value_objects import Disk, MatrixShape


# ---------------------------------------------------------------------------
# Componentwise-max Padding
# ---------------------------------------------------------------------------
def pad_to(grid: NDArray[Any], shape: MatrixShape) -> NDArray[Any]:
    """Return grid zero-padded at the bottom/right edges to ``shape``.

    The input is never modified. Always returns a new array, even when no
    padding is needed.

    Raises:
        ValueError: If grid is larger than shape in either dimension
    """
    rows, cols = grid.shape
    if rows > shape.rows or cols > shape.cols:
        raise ValueError(
            f"Cannot pad {rows}x{cols} grid down to {shape.rows}x{shape.cols}"
        )
    padded = np.zeros(shape.as_tuple(), dtype=grid.dtype)
    padded[:rows, :cols] = grid
    return padded


def aligned_operands(
    left: NDArray[Any], right: NDArray[Any]
) -> tuple[NDArray[Any], NDArray[Any]]:
    """Pad both grids to the componentwise maximum of their shapes.

    Cells outside an operand's own extent hold zero. This is deliberately not
    numpy broadcasting: a 1x1 operand is padded, not repeated.
    """
    shape = MatrixShape(rows=left.shape[0], cols=left.shape[1]).union(
        MatrixShape(rows=right.shape[0], cols=right.shape[1])
    )
    return pad_to(left, shape), pad_to(right, shape)


# ---------------------------------------------------------------------------
# Disk Rasterization
# ---------------------------------------------------------------------------
def disk_mask(shape: MatrixShape, disk: Disk) -> NDArray[np.bool_]:
    """Boolean mask of grid cells covered by a filled disk.

    A cell (x, y) is covered when (x - center_row)^2 + (y - center_col)^2 is
    at most radius^2. Squared distances avoid a square root per cell. Cells
    of the disk that fall outside the grid simply do not appear in the mask.

    Args:
        shape: Grid extent
        disk: Disk in grid coordinates (row, col)

    Returns:
        Array of shape (rows, cols), True where the cell is covered
    """
    dx = np.arange(shape.rows, dtype=np.float64) - disk.center_row
    dy = np.arange(shape.cols, dtype=np.float64) - disk.center_col
    distance_sq = dx[:, np.newaxis] ** 2 + dy[np.newaxis, :] ** 2
    return distance_sq <= disk.radius_squared


# ---------------------------------------------------------------------------
# Text Rendering
# ---------------------------------------------------------------------------
def format_cell(value: Any) -> str:
    """Format one cell: booleans as 0/1, integers as decimal, floats via %g."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def render_text(grid: NDArray[Any]) -> str:
    """Render a grid as text, one newline-terminated line per row.

    Cells are separated by a single space. Intended for inspection only; the
    output is not meant to be parsed back.
    """
    return "".join(
        " ".join(format_cell(value) for value in row) + "\n" for row in grid.tolist()
    )
