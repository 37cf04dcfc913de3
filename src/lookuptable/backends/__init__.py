"""Batch evaluation backends."""

from .base import InterpolationBackend
from .factory import build_backend
from .numba_backend import NumbaBackend
from .numpy_backend import NumpyBackend

__all__ = ["InterpolationBackend", "NumbaBackend", "NumpyBackend", "build_backend"]
