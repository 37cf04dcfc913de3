"""One-dimensional lookup table with clamped linear interpolation."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence, Tuple

import numpy as np

from ._validation import first_crowded_gap, frozen, real_array, require_exact, require_finite
from .backends.factory import build_backend
from .bracketing import bracket, interpolate
from .config import DEFAULT_CONFIG, TableConfig
from .errors import DuplicateAbscissaError, EmptyTableError, TableConstructionError

logger = logging.getLogger(__name__)


class Table1D:
    """Piecewise-linear approximation of a function of one variable.

    Samples are stored sorted by abscissa. Queries below the first sample or
    above the last one return the boundary ordinate; queries that land on a
    sample return its ordinate exactly. A single-sample table is a constant.

    Values are stored as float64. Strings and other non-real data are
    refused, and an integer abscissa that float64 cannot hold exactly (such
    as ``2**53 + 1``) raises :class:`TableConstructionError` instead of being
    rounded onto a neighbour.

    Tables are never mutated after construction, so one instance can be
    shared freely between threads.
    """

    def __init__(self, samples: Iterable[Sequence[float]], *, config: TableConfig | None = None) -> None:
        cfg = DEFAULT_CONFIG if config is None else config
        pairs = list(samples)
        if not pairs:
            raise EmptyTableError("At least one sample is required")
        data = real_array(pairs, "samples")
        if data.ndim != 2 or data.shape[1] != 2:
            raise TableConstructionError("samples must be (x, y) pairs of real numbers")

        xs = data[:, 0]
        ys = data[:, 1]
        require_exact((p[0] for p in pairs), xs, "sample abscissae")
        require_finite(xs, "sample abscissae")
        if cfg.reject_non_finite:
            require_finite(ys, "sample ordinates")

        order = np.argsort(xs, kind="stable")
        xs = xs[order]
        ys = ys[order]
        i = first_crowded_gap(xs, cfg.min_spacing)
        if i is not None:
            if xs[i] == xs[i + 1]:
                raise DuplicateAbscissaError(f"Duplicate abscissa {float(xs[i])!r}")
            raise DuplicateAbscissaError(
                f"Abscissae {float(xs[i])!r} and {float(xs[i + 1])!r} are closer than min_spacing={cfg.min_spacing!r}"
            )

        self._xs = frozen(xs)
        self._ys = frozen(ys)
        self._config = cfg
        self._backend = build_backend(cfg.backend)
        logger.debug(
            "Built Table1D with %d samples over [%g, %g] (%s backend)",
            len(self._xs),
            self._xs[0],
            self._xs[-1],
            self._backend.name,
        )

    @classmethod
    def from_arrays(
        cls,
        xs: Sequence[float],
        ys: Sequence[float],
        *,
        config: TableConfig | None = None,
    ) -> "Table1D":
        """Build a table from parallel abscissa and ordinate sequences."""
        if len(xs) != len(ys):
            raise TableConstructionError(f"xs and ys must have the same length, got {len(xs)} and {len(ys)}")
        return cls(zip(xs, ys), config=config)

    @property
    def xs(self) -> np.ndarray:
        return self._xs

    @property
    def ys(self) -> np.ndarray:
        return self._ys

    @property
    def samples(self) -> list[Tuple[float, float]]:
        return [(float(x), float(y)) for x, y in zip(self._xs, self._ys)]

    @property
    def domain(self) -> Tuple[float, float]:
        return float(self._xs[0]), float(self._xs[-1])

    @property
    def config(self) -> TableConfig:
        return self._config

    def __len__(self) -> int:
        return int(self._xs.shape[0])

    def __repr__(self) -> str:
        lo, hi = self.domain
        return f"Table1D(n={len(self)}, domain=[{lo!r}, {hi!r}])"

    def evaluate(self, x: float) -> float:
        return interpolate(self._ys, bracket(x, self._xs))

    __call__ = evaluate

    def evaluate_many(self, xs: Iterable[float] | np.ndarray) -> np.ndarray:
        """Evaluate an array of queries; the result has the shape of ``xs``."""
        values = np.asarray(xs, dtype=np.float64)
        return self._backend.interp1d(values, self._xs, self._ys)
