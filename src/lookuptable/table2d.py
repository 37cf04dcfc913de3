"""Two-dimensional lookup table with clamped bilinear interpolation."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence, Tuple

import numpy as np

from ._validation import first_crowded_gap, frozen, real_array, require_exact, require_finite
from .backends.factory import build_backend
from .bracketing import blend, bracket, interpolate
from .config import DEFAULT_CONFIG, TableConfig
from .errors import (
    EmptyTableError,
    GridShapeMismatchError,
    TableConstructionError,
    UnsortedOrDuplicateAxisError,
)

logger = logging.getLogger(__name__)


def _as_axis(values: Sequence[float], name: str) -> np.ndarray:
    axis = real_array(values, name)
    if axis.ndim != 1:
        raise TableConstructionError(f"{name} must be one-dimensional, got shape {axis.shape}")
    require_exact(values, axis, name)
    return axis


def _check_axis(axis: np.ndarray, name: str, min_spacing: float) -> None:
    require_finite(axis, name)
    i = first_crowded_gap(axis, min_spacing)
    if i is None:
        return
    if axis[i + 1] <= axis[i]:
        raise UnsortedOrDuplicateAxisError(
            f"{name} must be strictly increasing: {float(axis[i])!r} is followed by {float(axis[i + 1])!r}"
        )
    raise UnsortedOrDuplicateAxisError(
        f"{name} values {float(axis[i])!r} and {float(axis[i + 1])!r} are closer than min_spacing={min_spacing!r}"
    )


class Table2D:
    """Bilinear approximation of a function of two variables.

    ``grid[i][j]`` holds the value at ``(x_axis[i], y_axis[j])``. Each query
    coordinate is clamped to its axis range independently, bracketed on its
    axis, and the (up to four) surrounding grid values are blended: first
    along x on both bracketing rows of y, then along y between the two
    results. A coordinate that lands exactly on an axis node collapses that
    axis' bracket to a single node, so no interpolation happens along it.
    """

    def __init__(
        self,
        x_axis: Sequence[float],
        y_axis: Sequence[float],
        grid: Iterable[Sequence[float]],
        *,
        config: TableConfig | None = None,
    ) -> None:
        cfg = DEFAULT_CONFIG if config is None else config
        xa = _as_axis(x_axis, "x_axis")
        ya = _as_axis(y_axis, "y_axis")
        if xa.shape[0] == 0 or ya.shape[0] == 0:
            raise EmptyTableError(
                f"Both axes need at least one value, got {xa.shape[0]} x and {ya.shape[0]} y values"
            )

        expected = (xa.shape[0], ya.shape[0])
        try:
            raw = np.asarray(grid)
        except (TypeError, ValueError) as exc:
            raise GridShapeMismatchError(f"grid must be a complete {expected[0]}x{expected[1]} array") from exc
        if raw.shape != expected:
            raise GridShapeMismatchError(f"grid shape {raw.shape} does not match axis lengths {expected}")
        z = real_array(raw, "grid values")

        _check_axis(xa, "x_axis", cfg.min_spacing)
        _check_axis(ya, "y_axis", cfg.min_spacing)
        if cfg.reject_non_finite:
            require_finite(z, "grid values")

        self._x_axis = frozen(xa)
        self._y_axis = frozen(ya)
        self._grid = frozen(z)
        self._config = cfg
        self._backend = build_backend(cfg.backend)
        logger.debug(
            "Built Table2D with %dx%d grid over x=[%g, %g], y=[%g, %g] (%s backend)",
            expected[0],
            expected[1],
            xa[0],
            xa[-1],
            ya[0],
            ya[-1],
            self._backend.name,
        )

    @property
    def x_axis(self) -> np.ndarray:
        return self._x_axis

    @property
    def y_axis(self) -> np.ndarray:
        return self._y_axis

    @property
    def grid(self) -> np.ndarray:
        return self._grid

    @property
    def shape(self) -> Tuple[int, int]:
        return self._grid.shape

    @property
    def domain(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        return (
            (float(self._x_axis[0]), float(self._x_axis[-1])),
            (float(self._y_axis[0]), float(self._y_axis[-1])),
        )

    @property
    def config(self) -> TableConfig:
        return self._config

    def __repr__(self) -> str:
        (x0, x1), (y0, y1) = self.domain
        return f"Table2D(shape={self.shape}, x=[{x0!r}, {x1!r}], y=[{y0!r}, {y1!r}])"

    def evaluate(self, x: float, y: float) -> float:
        bx = bracket(x, self._x_axis)
        by = bracket(y, self._y_axis)
        z_j0 = interpolate(self._grid[:, by.lower], bx)
        if by.lower == by.upper:
            return z_j0
        z_j1 = interpolate(self._grid[:, by.upper], bx)
        return blend(z_j0, z_j1, by)

    __call__ = evaluate

    def evaluate_many(
        self,
        xs: Iterable[float] | np.ndarray,
        ys: Iterable[float] | np.ndarray,
    ) -> np.ndarray:
        """Evaluate broadcast arrays of ``x`` and ``y`` queries."""
        bx, by = np.broadcast_arrays(np.asarray(xs, dtype=np.float64), np.asarray(ys, dtype=np.float64))
        return self._backend.interp2d(bx, by, self._x_axis, self._y_axis, self._grid)
