"""
Configuration for the ordinal arithmetic engine.

Coefficients are bounded machine integers; the bound comes from a numpy
integer dtype so it matches the width used when ordinals are exported to
numeric arrays.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass(frozen=True)
class ArithmeticConfig:
    """Configuration for OrdinalArithmetic."""

    # Integer type bounding finite powers (int32 matches a 32-bit Int)
    coefficient_dtype: str = "int32"

    # Optional guard on exponent nesting (None = unbounded)
    max_depth: Optional[int] = None

    def __post_init__(self):
        try:
            dtype = np.dtype(self.coefficient_dtype)
        except TypeError as exc:
            raise ValueError(f"Unknown coefficient dtype: {self.coefficient_dtype!r}") from exc
        if not np.issubdtype(dtype, np.integer):
            raise ValueError(f"Coefficient dtype must be an integer type, got {dtype}")
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")

    @property
    def max_coefficient(self) -> int:
        """Largest coefficient representable by coefficient_dtype."""
        return int(np.iinfo(np.dtype(self.coefficient_dtype)).max)
