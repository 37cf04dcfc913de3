"""Numba-accelerated batch evaluation backend."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

try:
    from numba import njit
except Exception as exc:  # pragma: no cover - optional dependency
    njit = None
    _NUMBA_IMPORT_ERROR = exc
else:
    _NUMBA_IMPORT_ERROR = None


if njit is not None:

    @njit(cache=True)
    def _bracket_numba(v: float, axis: np.ndarray) -> tuple[int, int, float]:
        last = axis.shape[0] - 1
        if last == 0 or v <= axis[0]:
            return 0, 0, 0.0
        if v >= axis[last]:
            return last, last, 0.0
        if v != v:
            return 0, 1, np.nan
        upper = np.searchsorted(axis, v)
        if axis[upper] == v:
            return upper, upper, 0.0
        lower = upper - 1
        x0 = axis[lower]
        x1 = axis[upper]
        span = x1 - x0
        if np.isinf(span):
            return lower, upper, (v / 2.0 - x0 / 2.0) / (x1 / 2.0 - x0 / 2.0)
        return lower, upper, (v - x0) / span

    @njit(cache=True)
    def _blend_numba(v0: float, v1: float, f: float) -> float:
        step = v1 - v0
        if np.isinf(step) and np.isfinite(v0) and np.isfinite(v1):
            return (1.0 - f) * v0 + f * v1
        return v0 + step * f

    @njit(cache=True)
    def _interp1d_numba(values: np.ndarray, axis: np.ndarray, ordinates: np.ndarray, out: np.ndarray) -> None:
        for k in range(values.shape[0]):
            lo, hi, f = _bracket_numba(values[k], axis)
            if lo == hi:
                out[k] = ordinates[lo]
            else:
                out[k] = _blend_numba(ordinates[lo], ordinates[hi], f)

    @njit(cache=True)
    def _interp2d_numba(
        xs: np.ndarray,
        ys: np.ndarray,
        x_axis: np.ndarray,
        y_axis: np.ndarray,
        grid: np.ndarray,
        out: np.ndarray,
    ) -> None:
        for k in range(xs.shape[0]):
            i0, i1, fx = _bracket_numba(xs[k], x_axis)
            j0, j1, fy = _bracket_numba(ys[k], y_axis)
            if i0 == i1:
                z_j0 = grid[i0, j0]
                z_j1 = grid[i0, j1]
            else:
                z_j0 = _blend_numba(grid[i0, j0], grid[i1, j0], fx)
                z_j1 = _blend_numba(grid[i0, j1], grid[i1, j1], fx)
            if j0 == j1:
                out[k] = z_j0
            else:
                out[k] = _blend_numba(z_j0, z_j1, fy)

    # Prime JIT cache once to avoid a latency spike on the first batch.
    _prime_axis = np.array([0.0, 1.0], dtype=np.float64)
    _interp1d_numba(np.array([0.5]), _prime_axis, _prime_axis, np.empty(1))
    _interp2d_numba(np.array([0.5]), np.array([0.5]), _prime_axis, _prime_axis, np.eye(2), np.empty(1))


@dataclass(frozen=True)
class NumbaBackend:
    """Batch evaluation with numba-jitted scalar loops."""

    name: str = "numba"

    def interp1d(self, values: np.ndarray, axis: np.ndarray, ordinates: np.ndarray) -> np.ndarray:
        v = np.asarray(values, dtype=np.float64)
        flat = np.ascontiguousarray(v.ravel())
        out = np.empty(flat.shape[0], dtype=np.float64)
        _interp1d_numba(flat, axis, ordinates, out)
        return out.reshape(v.shape)

    def interp2d(
        self,
        xs: np.ndarray,
        ys: np.ndarray,
        x_axis: np.ndarray,
        y_axis: np.ndarray,
        grid: np.ndarray,
    ) -> np.ndarray:
        bx, by = np.broadcast_arrays(np.asarray(xs, dtype=np.float64), np.asarray(ys, dtype=np.float64))
        flat_x = np.ascontiguousarray(bx.ravel())
        flat_y = np.ascontiguousarray(by.ravel())
        out = np.empty(flat_x.shape[0], dtype=np.float64)
        _interp2d_numba(flat_x, flat_y, x_axis, y_axis, grid, out)
        return out.reshape(bx.shape)


def build_numba_backend() -> NumbaBackend:
    if njit is None:
        raise RuntimeError(
            f"Numba backend unavailable: {_NUMBA_IMPORT_ERROR}"
        ) from _NUMBA_IMPORT_ERROR
    return NumbaBackend()
