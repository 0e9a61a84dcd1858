"""Infrastructure adapters for the raster bounded context.

Adapter exported for simplified imports.
"""

from .text_writer import TextRasterWriter

__all__ = ["TextRasterWriter"]
