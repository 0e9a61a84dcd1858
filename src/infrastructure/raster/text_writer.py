"""Text writer adapter for RasterWriter.

Writes the inspection rendering of a RasterMatrix (one line per row, cells
separated by a single space) to any text stream, e.g. sys.stdout or a
StringIO. Not a storage format: nothing reads it back.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from domain.raster.matrix import RasterMatrix
from domain.raster.services import render_text

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)


class TextRasterWriter:
    """Infrastructure adapter rendering matrices as whitespace-separated text.

    Parameters
    ----------
    header: bool
        If True, precede the grid with a ``# rows x cols domain`` line.
    """

    def __init__(self, header: bool = False) -> None:
        self.header = header

    def render(self, matrix: RasterMatrix) -> str:
        """Return the full text for matrix, including the optional header."""
        body = render_text(matrix.to_array())
        if not self.header:
            return body
        return f"# {matrix.rows}x{matrix.cols} {matrix.domain.name}\n{body}"

    def write(self, matrix: RasterMatrix, stream: TextIO | None = None) -> int:
        """Write matrix to stream (default sys.stdout).

        Returns:
            Number of characters written
        """
        target = stream if stream is not None else sys.stdout
        text = self.render(matrix)
        target.write(text)
        logger.debug(
            "Wrote %dx%d %s matrix (%d chars)",
            matrix.rows,
            matrix.cols,
            matrix.domain.name,
            len(text),
        )
        return len(text)
