"""
Core infrastructure for gramschmidt.

Key components:
    protocols: LinalgPrimitives, GramSchmidt protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Layout, timing, tolerances, BLAS primitives
"""

from gramschmidt.core.protocols import LinalgPrimitives, GramSchmidt
from gramschmidt.core.result import Result
from gramschmidt.core.exceptions import (
    GramSchmidtError,
    ValidationError,
    DimensionError,
    NumericalError,
    RankDeficientError,
    NotComputedError,
)

__all__ = [
    # Protocols
    "LinalgPrimitives",
    "GramSchmidt",
    # Result
    "Result",
    # Exceptions
    "GramSchmidtError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "RankDeficientError",
    "NotComputedError",
]
