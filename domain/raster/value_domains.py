"""Raster Bounded Context - Value Domains.

A value domain is the set of representable pixel values for one element type
together with its maximum. Every stored cell lies in ``[0, max_value]``.

Supported domains:
    bool     max 1 (True)
    int8     max 127
    int16    max 32767
    float32  max 1.0 (unit float)

Anything else is rejected with UnsupportedTypeError when it is resolved, so a
matrix can never be built over an unknown element type.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.raster.errors import UnsupportedTypeError


class ValueDomain(BaseModel):
    """Pixel value domain (Value Object).

    Frozen models compare by value, so two lookups of the same domain are equal.
    """

    name: str
    dtype_name: str
    max_value: float = Field(gt=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_dtype(self) -> "ValueDomain":
        try:
            np.dtype(self.dtype_name)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Unknown dtype: {self.dtype_name}") from e
        return self

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(self.dtype_name)

    @property
    def is_boolean(self) -> bool:
        return self.dtype == np.bool_

    @property
    def zero(self) -> Any:
        """Zero value as a Python scalar of this domain."""
        return self.scalar(0)

    @property
    def top(self) -> Any:
        """Maximum value as a Python scalar of this domain."""
        return self.scalar(self.max_value)

    def scalar(self, value: Any) -> Any:
        """Saturate a single value into the domain and return a Python scalar."""
        return self.saturate(np.asarray(value)).item()

    def operand(self, value: Any) -> Any:
        """Convert a scalar operand to the domain type without clamping.

        Integer domains truncate toward zero, float32 rounds to single
        precision and bool keeps truthiness. Negative values survive so that
        the saturating operators see them.
        """
        if self.is_boolean:
            return bool(value)
        if self.dtype.kind == "f":
            return float(np.float32(value))
        return float(np.trunc(float(value)))

    def saturate(self, values: ArrayLike) -> NDArray[Any]:
        """Clamp values to [0, max_value] and cast to the domain dtype.

        Computation happens in float64. Integer casts truncate toward zero and
        NaN saturates to zero.
        """
        as_float = np.asarray(values, dtype=np.float64)
        as_float = np.nan_to_num(as_float, nan=0.0)
        clipped = np.clip(as_float, 0.0, self.max_value)
        return clipped.astype(self.dtype)

    def contains(self, values: ArrayLike) -> bool:
        """Check that every value is finite and inside [0, max_value]."""
        as_float = np.asarray(values, dtype=np.float64)
        if not np.isfinite(as_float).all():
            return False
        return bool(((as_float >= 0) & (as_float <= self.max_value)).all())

    @property
    def is_integral(self) -> bool:
        """True for domains that hold whole numbers only (bool and integers)."""
        return self.dtype.kind != "f"

    def holds_exactly(self, values: ArrayLike) -> bool:
        """Check that storing values needs no truncation."""
        if not self.is_integral:
            return True
        as_float = np.asarray(values, dtype=np.float64)
        return bool((as_float == np.trunc(as_float)).all())


BOOL = ValueDomain(name="bool", dtype_name="bool", max_value=1)
INT8 = ValueDomain(name="int8", dtype_name="int8", max_value=127)
INT16 = ValueDomain(name="int16", dtype_name="int16", max_value=32767)
UNIT_FLOAT = ValueDomain(name="float32", dtype_name="float32", max_value=1.0)

SUPPORTED_DOMAINS: dict[str, ValueDomain] = {
    d.name: d for d in (BOOL, INT8, INT16, UNIT_FLOAT)
}

# Python builtins that name a domain directly. np.dtype(float) is float64,
# which is not a supported domain, so ``float`` is mapped explicitly.
_PYTHON_TYPES: dict[type, ValueDomain] = {bool: BOOL, float: UNIT_FLOAT}


def resolve_domain(selector: Any) -> ValueDomain:
    """Return the ValueDomain selected by ``selector``.

    Args:
        selector: A ValueDomain, a domain name ("bool", "int8", "int16",
            "float32"), a numpy dtype or scalar type, or ``bool``/``float``.

    Raises:
        UnsupportedTypeError: If selector does not select a supported domain
    """
    if isinstance(selector, ValueDomain):
        return selector
    if isinstance(selector, str) and selector in SUPPORTED_DOMAINS:
        return SUPPORTED_DOMAINS[selector]
    if isinstance(selector, type) and selector in _PYTHON_TYPES:
        return _PYTHON_TYPES[selector]
    try:
        dtype = np.dtype(selector)
    except (TypeError, ValueError) as e:
        raise UnsupportedTypeError(f"Undefined element type: {selector!r}") from e
    domain = SUPPORTED_DOMAINS.get(dtype.name)
    if domain is None:
        raise UnsupportedTypeError(f"Undefined element type: {dtype.name}")
    return domain
