"""Construction options shared by 1-D and 2-D tables."""

from __future__ import annotations

from dataclasses import dataclass
import math

BACKENDS = ("numpy", "numba", "auto")


@dataclass(frozen=True)
class TableConfig:
    """Container for user-controlled table parameters."""

    backend: str = "numpy"
    min_spacing: float = 0.0
    reject_non_finite: bool = True

    def __post_init__(self) -> None:
        if self.backend not in BACKENDS:
            raise ValueError("backend must be one of: numpy, numba, auto")
        spacing = float(self.min_spacing)
        if not math.isfinite(spacing):
            raise ValueError("min_spacing must be finite")
        if spacing < 0.0:
            raise ValueError("min_spacing must be >= 0")
        if not isinstance(self.reject_non_finite, bool):
            raise ValueError("reject_non_finite must be a bool")


DEFAULT_CONFIG = TableConfig()
