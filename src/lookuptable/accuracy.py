"""Compare a table against the function it approximates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence, Union

import numpy as np

from .table1d import Table1D
from .table2d import Table2D


@dataclass
class AccuracyReport:
    n_points: int
    max_abs_diff: float
    p95_abs_diff: float
    mean_abs_diff: float


def measure_accuracy(
    table: Union[Table1D, Table2D],
    reference: Callable[..., float],
    points: Sequence,
) -> AccuracyReport:
    """Evaluate ``table`` and ``reference`` at ``points`` and summarize the absolute error.

    For a :class:`Table1D`, ``points`` is a sequence of ``x`` values and
    ``reference`` is called as ``reference(x)``. For a :class:`Table2D`,
    ``points`` is a sequence of ``(x, y)`` pairs and ``reference`` is called
    as ``reference(x, y)``. Points where either side is not finite are left
    out of the summary.
    """
    pts = np.asarray(points, dtype=np.float64)
    if pts.size == 0:
        raise ValueError("points must not be empty")

    if isinstance(table, Table2D):
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError(f"Table2D sample points must have shape (n, 2), got {pts.shape}")
        approx = table.evaluate_many(pts[:, 0], pts[:, 1])
        exact = np.array([float(reference(x, y)) for x, y in pts], dtype=np.float64)
    else:
        if pts.ndim > 1:
            raise ValueError(f"Table1D sample points must be one-dimensional, got shape {pts.shape}")
        pts = pts.ravel()
        approx = table.evaluate_many(pts)
        exact = np.array([float(reference(x)) for x in pts], dtype=np.float64)

    mask = np.isfinite(approx) & np.isfinite(exact)
    if not mask.any():
        raise ValueError("no sample point produced a finite value on both sides")
    diff = np.abs(approx[mask] - exact[mask])

    return AccuracyReport(
        n_points=int(mask.sum()),
        max_abs_diff=float(np.max(diff)),
        p95_abs_diff=float(np.percentile(diff, 95.0)),
        mean_abs_diff=float(np.mean(diff)),
    )
