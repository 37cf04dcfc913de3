"""Errors raised while building lookup tables."""

from __future__ import annotations


class TableConstructionError(ValueError):
    """Base class for every invalid-input error raised by a table constructor."""


class EmptyTableError(TableConstructionError):
    """No samples, or an empty axis, was supplied."""


class DuplicateAbscissaError(TableConstructionError):
    """Two 1-D samples share the same abscissa."""


class GridShapeMismatchError(TableConstructionError):
    """Grid dimensions do not match ``(len(x_axis), len(y_axis))``."""


class UnsortedOrDuplicateAxisError(TableConstructionError):
    """Axis values are not strictly increasing."""


class NonFiniteValueError(TableConstructionError):
    """A NaN or infinity was found where only finite values are allowed."""
