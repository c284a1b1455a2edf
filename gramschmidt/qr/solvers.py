"""
Solver dispatch for QR factorization.

This module provides the factorize() function (public API), method
selection, and the one-shot cgs()/mgs()/cgs2() helpers.
"""

from typing import Literal
import warnings
import numpy as np
from numpy.typing import ArrayLike, NDArray

from gramschmidt.core.validation import check_array
from gramschmidt.qr.backends import METHODS
from gramschmidt.qr.backends._common import GramSchmidtEngine
from gramschmidt.qr.design import QRDesign
from gramschmidt.qr.solution import QRSolution


# Type alias for method selection
MethodChoice = Literal['cgs', 'mgs', 'cgs2']


def factorize(
    A: ArrayLike,
    *,
    method: MethodChoice = 'cgs2',
    rank_tol: float | None = None,
) -> QRSolution:
    """
    Compute a QR factorization A = QR by Gram-Schmidt orthogonalization.

    This is the primary public API. All input validation, method selection,
    and result wrapping happens here. Use an engine class directly to
    factorize many matrices of one shape without reallocating.

    Args:
        A: Matrix (m x n, m >= n) with full column rank. Any array-like,
           row- or column-major.
        method: Orthogonalization method:
            - 'cgs2': Classical Gram-Schmidt with reorthogonalization
              (default, orthogonal to working precision)
            - 'mgs': Modified Gram-Schmidt
            - 'cgs': Classical Gram-Schmidt (fastest, least stable)
        rank_tol: Absolute threshold below which a column counts as
            dependent. Defaults to a tolerance relative to ‖A‖_F.

    Returns:
        QRSolution with Q, R, diagnostics and a least-squares solve()

    Raises:
        ValueError: If method is unknown
        ValidationError: If A is invalid
        DimensionError: If A is not 2D or has more columns than rows
        RankDeficientError: If A is numerically rank-deficient

    Example:
        >>> import numpy as np
        >>> from gramschmidt import factorize
        >>>
        >>> A = np.random.default_rng(0).standard_normal((100, 10))
        >>> result = factorize(A, method='mgs')
        >>> print(result.orthogonality_loss)
        >>> print(result.summary())
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    A_arr = check_array(A, 'A')

    # === Construct Design ===
    design = QRDesign.from_array(A_arr)

    # === Select Backend ===
    engine = _get_engine(method, design, rank_tol)

    # === Solve ===
    result = engine.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    # === Wrap and Return ===
    return QRSolution(_result=result, _design=design)


def cgs(A: ArrayLike) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Classical Gram-Schmidt QR factorization, returning (Q, R).

    To factorize repeatedly, prefer constructing a ClassicalGramSchmidt
    and calling its compute() method.
    """
    return _one_shot('cgs', A)


def mgs(A: ArrayLike) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Modified Gram-Schmidt QR factorization, returning (Q, R).

    To factorize repeatedly, prefer constructing a ModifiedGramSchmidt
    and calling its compute() method.
    """
    return _one_shot('mgs', A)


def cgs2(A: ArrayLike) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Reorthogonalized Gram-Schmidt QR factorization, returning (Q, R).

    To factorize repeatedly, prefer constructing a
    ReorthogonalizedGramSchmidt and calling its compute() method.
    """
    return _one_shot('cgs2', A)


def _one_shot(method: str, A: ArrayLike) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    design = QRDesign.from_array(A)
    engine = METHODS[method].from_matrix(design)
    engine.compute(design)
    return engine.q.copy(order='K'), engine.r.copy(order='K')


def _get_engine(
    choice: str,
    design: QRDesign,
    rank_tol: float | None,
) -> GramSchmidtEngine:
    """
    Select and allocate the engine for a method.

    Args:
        choice: Method name
        design: The validated design (shape and layout of the buffers)
        rank_tol: Explicit rank tolerance or None

    Returns:
        Engine ready to solve

    Raises:
        ValueError: If unknown method specified
    """
    try:
        engine_cls = METHODS[choice]
    except KeyError:
        raise ValueError(
            f"Unknown method: {choice!r}. Valid options: {sorted(METHODS)}"
        ) from None
    return engine_cls.from_matrix(design, rank_tol=rank_tol)
