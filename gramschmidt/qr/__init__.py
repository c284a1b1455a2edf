"""
QR factorization by Gram-Schmidt orthogonalization.

Public API:
    factorize(A, ...) -> QRSolution
    cgs(A), mgs(A), cgs2(A) -> (Q, R)

Engines, for factorizing many matrices of one shape:
    ClassicalGramSchmidt, ModifiedGramSchmidt, ReorthogonalizedGramSchmidt

Example:
    >>> from gramschmidt.qr import factorize
    >>> result = factorize(A, method='cgs2')
    >>> print(result.q, result.r)
    >>> print(result.summary())
"""

from gramschmidt.qr.design import QRDesign
from gramschmidt.qr.solution import QRSolution, QRParams
from gramschmidt.qr.backends import (
    ClassicalGramSchmidt,
    ModifiedGramSchmidt,
    ReorthogonalizedGramSchmidt,
    EngineState,
    METHODS,
)
from gramschmidt.qr.solvers import factorize, cgs, mgs, cgs2
from gramschmidt.qr.datasets import lauchli

__all__ = [
    "factorize",
    "cgs",
    "mgs",
    "cgs2",
    "QRDesign",
    "QRSolution",
    "QRParams",
    "ClassicalGramSchmidt",
    "ModifiedGramSchmidt",
    "ReorthogonalizedGramSchmidt",
    "EngineState",
    "METHODS",
    "lauchli",
]
