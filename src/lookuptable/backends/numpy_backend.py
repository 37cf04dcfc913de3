"""Default NumPy backend for batch evaluation."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..bracketing import blend_many, bracket_many, interpolate_many


@dataclass(frozen=True)
class NumpyBackend:
    """Vectorized evaluation built on :func:`bracket_many`."""

    name: str = "numpy"

    def interp1d(self, values: np.ndarray, axis: np.ndarray, ordinates: np.ndarray) -> np.ndarray:
        lower, upper, fractions = bracket_many(values, axis)
        return interpolate_many(ordinates, lower, upper, fractions)

    def interp2d(
        self,
        xs: np.ndarray,
        ys: np.ndarray,
        x_axis: np.ndarray,
        y_axis: np.ndarray,
        grid: np.ndarray,
    ) -> np.ndarray:
        i0, i1, fx = bracket_many(xs, x_axis)
        j0, j1, fy = bracket_many(ys, y_axis)
        same_x = i0 == i1
        z_j0 = blend_many(grid[i0, j0], grid[i1, j0], same_x, fx)
        z_j1 = blend_many(grid[i0, j1], grid[i1, j1], same_x, fx)
        return blend_many(z_j0, z_j1, j0 == j1, fy)


def build_numpy_backend() -> NumpyBackend:
    return NumpyBackend()
