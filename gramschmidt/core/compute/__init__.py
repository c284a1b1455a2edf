"""
Shared compute infrastructure for gramschmidt.

IMPORTANT: This is NOT where the orthogonalization methods live. Those go
in gramschmidt/qr/backends/. This module contains shared NUMERIC
infrastructure.

Submodules:
    layout: Row-major / column-major buffer handling
    timing: Execution timing utilities
    tolerances: Tolerance tiers and the rank-deficiency threshold
    linalg: BLAS primitive provider
"""

from gramschmidt.core.compute.layout import MatrixLayout
from gramschmidt.core.compute.timing import Timer, timed

__all__ = [
    "MatrixLayout",
    "Timer",
    "timed",
]
