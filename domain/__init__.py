"""Grayscale Raster Domain Layer.

This package contains the core logic organized by bounded contexts:
- raster: Grayscale matrices, pixel value domains, raster primitives
"""

# Imports alphabetized per project style (isort)
from domain import raster

__all__ = ["raster"]
