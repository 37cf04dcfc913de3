"""Shared checks run by table constructors."""

from __future__ import annotations

import numbers
from typing import Iterable

import numpy as np

from .errors import NonFiniteValueError, TableConstructionError


def real_array(values: object, what: str) -> np.ndarray:
    """Convert ``values`` to ``float64``, refusing strings and other non-real data."""
    try:
        raw = np.asarray(values)
    except (TypeError, ValueError) as exc:
        raise TableConstructionError(f"{what} must be real numbers") from exc
    kind = raw.dtype.kind
    if kind == "O":
        if not all(isinstance(v, numbers.Real) for v in raw.ravel()):
            raise TableConstructionError(f"{what} must be real numbers")
    elif kind not in "biuf":
        raise TableConstructionError(f"{what} must be real numbers, got dtype {raw.dtype}")
    try:
        return raw.astype(np.float64)
    except (TypeError, ValueError, OverflowError) as exc:
        raise TableConstructionError(f"{what} must be real numbers representable as float64") from exc


def require_exact(raw_values: Iterable[object], converted: np.ndarray, what: str) -> None:
    """Reject integers that do not survive conversion to ``float64`` unchanged."""
    for v, f in zip(raw_values, converted):
        if isinstance(v, numbers.Integral) and float(f) != int(v):
            raise TableConstructionError(f"{what} value {int(v)!r} cannot be represented exactly as a float64")


def require_finite(values: np.ndarray, what: str) -> None:
    bad = ~np.isfinite(values)
    if np.any(bad):
        first = values[bad].ravel()[0]
        raise NonFiniteValueError(f"{what} must be finite, found {first!r}")


def first_crowded_gap(axis: np.ndarray, min_spacing: float) -> int | None:
    """Index ``i`` of the first pair ``axis[i], axis[i + 1]`` not separated by more than ``min_spacing``."""
    gaps = np.diff(axis)
    crowded = np.flatnonzero(gaps <= min_spacing)
    if crowded.size == 0:
        return None
    return int(crowded[0])


def frozen(values: np.ndarray) -> np.ndarray:
    out = np.array(values, dtype=np.float64, copy=True)
    out.setflags(write=False)
    return out
