"""Domain Port(s) for Raster Collaborators.

Defines interfaces (Protocols) that collaborators must implement.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TextIO

from numpy.typing import NDArray

if TYPE_CHECKING:
    from domain.raster.matrix import RasterMatrix


class RandomSource(Protocol):
    """Port for producing bounded random cell values.

    The default implementation is BoundedRandomSource; tests may inject a
    deterministic source.
    """

    def next(self) -> Any:
        """Return one value inside the source's bounds."""
        ...

    def draw(self, rows: int, cols: int) -> NDArray[Any]:
        """Return a (rows, cols) array of independent values."""
        ...


class RasterWriter(Protocol):
    """Port for emitting a human-readable view of a matrix.

    Implementations live in infrastructure (e.g., the text writer).
    """

    def write(self, matrix: "RasterMatrix", stream: TextIO) -> int:
        """Write the matrix to stream and return the number of characters."""
        ...
