"""Raster Bounded Context.

Responsible for grayscale raster matrices and their pixel value domains:
- Value Objects: ValueDomain, MatrixShape, Disk
- Entities: RasterMatrix (mutable, exclusively owned grid)
- Services: zero padding, disk rasterization, text rendering
"""

from domain.raster.config import RasterConfig
from domain.raster.errors import (
    DomainMismatchError,
    IndexOutOfRangeError,
    InvalidRasterError,
    RasterError,
    UnsupportedTypeError,
)
from domain.raster.matrix import RasterMatrix
from domain.raster.random_source import BoundedRandomSource
from domain.raster.value_domains import (
    BOOL,
    INT8,
    INT16,
    UNIT_FLOAT,
    ValueDomain,
    resolve_domain,
)
from domain.raster.value_objects import Disk, MatrixShape

__all__ = [
    "BOOL",
    "INT8",
    "INT16",
    "UNIT_FLOAT",
    "BoundedRandomSource",
    "Disk",
    "DomainMismatchError",
    "IndexOutOfRangeError",
    "InvalidRasterError",
    "MatrixShape",
    "RasterConfig",
    "RasterError",
    "RasterMatrix",
    "UnsupportedTypeError",
    "ValueDomain",
    "resolve_domain",
]
