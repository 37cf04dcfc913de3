"""Precomputed lookup tables with clamped linear and bilinear interpolation."""

import logging

from .accuracy import AccuracyReport, measure_accuracy
from .bracketing import Bracket, bracket, bracket_many
from .config import DEFAULT_CONFIG, TableConfig
from .errors import (
    DuplicateAbscissaError,
    EmptyTableError,
    GridShapeMismatchError,
    NonFiniteValueError,
    TableConstructionError,
    UnsortedOrDuplicateAxisError,
)
from .logging_config import setup_logging
from .table1d import Table1D
from .table2d import Table2D

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AccuracyReport",
    "Bracket",
    "DEFAULT_CONFIG",
    "DuplicateAbscissaError",
    "EmptyTableError",
    "GridShapeMismatchError",
    "NonFiniteValueError",
    "Table1D",
    "Table2D",
    "TableConfig",
    "TableConstructionError",
    "UnsortedOrDuplicateAxisError",
    "bracket",
    "bracket_many",
    "measure_accuracy",
    "setup_logging",
]
