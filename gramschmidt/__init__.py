"""
gramschmidt: QR factorization by Gram-Schmidt orthogonalization.

Three numerically distinct methods behind one interface:
    cgs: Classical Gram-Schmidt (batched projections, least stable)
    mgs: Modified Gram-Schmidt (sequential projections)
    cgs2: Classical Gram-Schmidt with reorthogonalization (most stable)

Submodules:
    qr: Factorization engines and the factorize() entry point
    core: Exceptions, validation, BLAS primitives, tolerances
"""

__version__ = "0.1.0"

from gramschmidt.core.exceptions import (
    GramSchmidtError,
    ValidationError,
    DimensionError,
    NumericalError,
    RankDeficientError,
    NotComputedError,
)
from gramschmidt.qr import (
    factorize,
    cgs,
    mgs,
    cgs2,
    QRSolution,
    ClassicalGramSchmidt,
    ModifiedGramSchmidt,
    ReorthogonalizedGramSchmidt,
    lauchli,
)

__all__ = [
    "__version__",
    "factorize",
    "cgs",
    "mgs",
    "cgs2",
    "QRSolution",
    "ClassicalGramSchmidt",
    "ModifiedGramSchmidt",
    "ReorthogonalizedGramSchmidt",
    "lauchli",
    "GramSchmidtError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "RankDeficientError",
    "NotComputedError",
]
