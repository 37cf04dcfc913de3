"""Backend factory for batch evaluation kernels."""

from __future__ import annotations

import logging

from .base import InterpolationBackend
from .numba_backend import build_numba_backend
from .numpy_backend import build_numpy_backend

logger = logging.getLogger(__name__)


def build_backend(name: str) -> InterpolationBackend:
    if name == "numpy":
        return build_numpy_backend()
    if name == "numba":
        return build_numba_backend()
    if name == "auto":
        try:
            return build_numba_backend()
        except RuntimeError as exc:
            logger.debug("Falling back to numpy backend: %s", exc)
            return build_numpy_backend()
    raise ValueError(f"Unknown backend: {name}")
