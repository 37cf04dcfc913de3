"""Backend protocol for batch table evaluation."""

from __future__ import annotations

from typing import Protocol

import numpy as np


class InterpolationBackend(Protocol):
    name: str

    def interp1d(self, values: np.ndarray, axis: np.ndarray, ordinates: np.ndarray) -> np.ndarray:
        ...

    def interp2d(
        self,
        xs: np.ndarray,
        ys: np.ndarray,
        x_axis: np.ndarray,
        y_axis: np.ndarray,
        grid: np.ndarray,
    ) -> np.ndarray:
        ...
