"""
Classical Gram-Schmidt (CGS).

Each column is projected onto all previously finalized basis vectors in one
batch: the coefficients are r = Q[:, :j]ᵀ a_j, computed from the original
column, and the residual is a_j - Q[:, :j] r. Both steps are a single
matrix-vector product, which makes CGS the cheapest of the three methods.

Rounding error in earlier basis vectors is never fed back into later
projections, so orthogonality degrades with cond(A)². Prefer
ReorthogonalizedGramSchmidt for anything but well-conditioned input.
"""

from typing import final
import numpy as np
from numpy.typing import NDArray

from gramschmidt.core.protocols import LinalgPrimitives
from gramschmidt.qr.backends._common import GramSchmidtEngine


def project_out(
    blas: LinalgPrimitives,
    basis: NDArray[np.float64],
    v: NDArray[np.float64],
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    One batched projection-and-subtract pass.

    Args:
        blas: Primitive provider
        basis: m x j matrix with orthonormal columns (j >= 1)
        v: Vector of length m, contiguous float64

    Returns:
        (coefficients, residual) with coefficients = basisᵀ v and
        residual = v - basis @ coefficients
    """
    coefficients = blas.gemv(1.0, basis, v, trans=True)
    residual = blas.gemv(-1.0, basis, coefficients, beta=1.0, y=v)
    return coefficients, residual


@final
class ClassicalGramSchmidt(GramSchmidtEngine):
    """
    QR factorization by classical Gram-Schmidt.

    Example:
        >>> cgs = ClassicalGramSchmidt.from_matrix(A)
        >>> cgs.compute(A)
        >>> Q, R = cgs.q, cgs.r
    """

    method = 'cgs'

    def _orthogonalize(self, j: int, v: NDArray[np.float64]) -> NDArray[np.float64]:
        if j == 0:
            return v
        basis = self._layout.leading_columns(self._q, j)
        coefficients, residual = project_out(self._blas, basis, v)
        self._r[:j, j] = coefficients
        return residual
