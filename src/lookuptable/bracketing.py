"""Bracketing primitive shared by every table dimension.

A query value is first clamped to the axis range, then located with a binary
search.  The result is a :class:`Bracket` holding the indices of the two
surrounding axis nodes and the fractional position of the value between them.
When the value clamps to a boundary or lands exactly on a node, both indices
are equal and the fraction is zero, so interpolation returns the stored value
untouched.

Differences of finite values near the float64 limit can overflow.  Such
spans are measured on halved coordinates, and such blends use the convex
form ``(1 - f) * v0 + f * v1``, so every finite table yields finite results.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence, Tuple

import numpy as np


class Bracket(NamedTuple):
    lower: int
    upper: int
    fraction: float


def bracket(value: float, axis: np.ndarray) -> Bracket:
    """Locate ``value`` within the strictly increasing ``axis``."""
    v = float(value)
    last = axis.shape[0] - 1
    if last == 0 or v <= axis[0]:
        return Bracket(0, 0, 0.0)
    if v >= axis[last]:
        return Bracket(last, last, 0.0)
    if math.isnan(v):
        return Bracket(0, 1, math.nan)

    upper = int(np.searchsorted(axis, v, side="left"))
    if axis[upper] == v:
        return Bracket(upper, upper, 0.0)
    lower = upper - 1
    x0 = float(axis[lower])
    x1 = float(axis[upper])
    span = x1 - x0
    if math.isinf(span):
        return Bracket(lower, upper, (v / 2.0 - x0 / 2.0) / (x1 / 2.0 - x0 / 2.0))
    return Bracket(lower, upper, (v - x0) / span)


def blend(v0: float, v1: float, b: Bracket) -> float:
    a = float(v0)
    if b.lower == b.upper:
        return a
    c = float(v1)
    f = b.fraction
    step = c - a
    if math.isinf(step) and math.isfinite(a) and math.isfinite(c):
        return (1.0 - f) * a + f * c
    return a + step * f


def interpolate(values: Sequence[float], b: Bracket) -> float:
    return blend(values[b.lower], values[b.upper], b)


def bracket_many(values: np.ndarray, axis: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Vectorized :func:`bracket`; element-wise identical results."""
    v = np.asarray(values, dtype=np.float64)
    last = axis.shape[0] - 1
    if last == 0:
        zeros = np.zeros(v.shape, dtype=np.intp)
        return zeros, zeros.copy(), np.zeros(v.shape, dtype=np.float64)

    clamped = np.clip(v, axis[0], axis[last])
    upper = np.minimum(np.searchsorted(axis, clamped, side="left"), last)
    hit = axis[upper] == clamped
    lower = np.where(hit, upper, upper - 1)

    missing = np.isnan(clamped)
    lower = np.where(missing, 0, lower)
    upper = np.where(missing, 1, upper)

    x0 = axis[lower]
    x1 = axis[upper]
    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        span = x1 - x0
        direct = (clamped - x0) / span
        halved = (clamped / 2.0 - x0 / 2.0) / (x1 / 2.0 - x0 / 2.0)
        fractions = np.where(lower == upper, 0.0, np.where(np.isinf(span), halved, direct))
    return lower, upper, fractions


def blend_many(v0: np.ndarray, v1: np.ndarray, same: np.ndarray, fractions: np.ndarray) -> np.ndarray:
    with np.errstate(invalid="ignore", over="ignore"):
        step = v1 - v0
        direct = v0 + step * fractions
        convex = (1.0 - fractions) * v0 + fractions * v1
        wide = np.isinf(step) & np.isfinite(v0) & np.isfinite(v1)
        return np.where(same, v0, np.where(wide, convex, direct))


def interpolate_many(
    values: np.ndarray,
    lower: np.ndarray,
    upper: np.ndarray,
    fractions: np.ndarray,
) -> np.ndarray:
    return blend_many(values[lower], values[upper], lower == upper, fractions)
