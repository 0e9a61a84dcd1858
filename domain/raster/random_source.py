"""Bounded uniform random values for randomized matrix construction."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from domain.raster.value_domains import ValueDomain, resolve_domain

# Draws strictly above this threshold become True in the boolean domain.
BOOL_THRESHOLD = 0.5


class BoundedRandomSource:
    """Uniform random values over [low, high] for one value domain.

    Each value comes from a real-valued uniform draw. Boolean domains map
    draws above BOOL_THRESHOLD to True; integer domains truncate toward zero.

    Parameters
    ----------
    low, high: float
        Bounds of the draw. ``low`` must not exceed ``high``.
    domain:
        Value domain (or anything resolve_domain accepts) of the produced values.
    seed: int | None
        Seed for a fresh numpy Generator. Ignored when ``rng`` is given.
    rng: numpy.random.Generator | None
        Generator to draw from, for callers that share one stream.
    """

    def __init__(
        self,
        low: float,
        high: float,
        domain: Any = "int8",
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        if low > high:
            raise ValueError(f"low ({low}) must not exceed high ({high})")
        self.low = float(low)
        self.high = float(high)
        self.domain: ValueDomain = resolve_domain(domain)
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    @classmethod
    def for_domain(
        cls,
        domain: Any,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> "BoundedRandomSource":
        """Source over the whole domain, [0, max_value]."""
        resolved = resolve_domain(domain)
        return cls(0, resolved.max_value, domain=resolved, seed=seed, rng=rng)

    def _convert(self, draws: NDArray[np.float64]) -> NDArray[Any]:
        if self.domain.is_boolean:
            return draws > BOOL_THRESHOLD
        return draws.astype(self.domain.dtype)

    def next(self) -> Any:
        """Return one independent value as a Python scalar."""
        draw = np.asarray(self._rng.uniform(self.low, self.high))
        return self._convert(draw).item()

    def draw(self, rows: int, cols: int) -> NDArray[Any]:
        """Return a (rows, cols) array of independent values."""
        draws = self._rng.uniform(self.low, self.high, size=(rows, cols))
        return self._convert(draws)
