"""Raster Bounded Context - Construction Settings.

RasterConfig bundles everything needed to build a RasterMatrix so callers can
validate settings once and build matrices from them repeatedly.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from domain.raster.value_domains import ValueDomain, resolve_domain

DomainName = Literal["bool", "int8", "int16", "float32"]


class RasterConfig(BaseModel):
    """Settings for one RasterMatrix.

    Parameters
    ----------
    rows, cols : int
        Grid extent, both > 0.
    fill : bool, optional
        Fill with uniform random values instead of zeros. Default ``False``.
    domain : {'bool', 'int8', 'int16', 'float32'}, optional
        Pixel value domain. Default ``'int8'``.
    seed : int or None, optional
        Seed for the random fill. ``None`` draws fresh entropy.
    """

    rows: int = Field(gt=0, description="Number of grid rows")
    cols: int = Field(gt=0, description="Number of grid columns")
    fill: bool = Field(default=False, description="Random fill instead of zeros")
    domain: DomainName = Field(default="int8", description="Pixel value domain")
    seed: int | None = Field(default=None, ge=0, description="Random fill seed")

    model_config = ConfigDict(frozen=True)

    @property
    def value_domain(self) -> ValueDomain:
        return resolve_domain(self.domain)
