from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="lookuptable",
    version="0.1.0",
    description="Precomputed 1-D and 2-D lookup tables with clamped linear and bilinear interpolation",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=["numpy"],
    extras_require={
        "numba": ["numba"],
        "test": ["pytest"],
    },
)
