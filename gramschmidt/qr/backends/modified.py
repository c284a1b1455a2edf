"""
Modified Gram-Schmidt (MGS).

Mathematically equivalent to CGS, but each projection coefficient is taken
against the residual as updated by all earlier subtractions instead of
against the original column. Rounding error from earlier steps is thereby
projected out again, and orthogonality degrades only with cond(A).

The inner loop is inherently sequential (coefficient k depends on the
residual after step k-1), so MGS gives up the batched matrix-vector
product of CGS; each step is one dot and one axpy.
"""

from typing import final
import numpy as np
from numpy.typing import NDArray

from gramschmidt.qr.backends._common import GramSchmidtEngine


@final
class ModifiedGramSchmidt(GramSchmidtEngine):
    """
    QR factorization by modified Gram-Schmidt.

    Example:
        >>> mgs = ModifiedGramSchmidt.from_shape(A.shape)
        >>> mgs.compute(A)
        >>> R = mgs.r  # exact zeros below the diagonal
    """

    method = 'mgs'

    def _orthogonalize(self, j: int, v: NDArray[np.float64]) -> NDArray[np.float64]:
        # Orthogonalize the current column against all finished columns,
        # in increasing order.
        for k in range(j):
            q_k = self._layout.column(self._q, k)
            coefficient = self._blas.dot(q_k, v)
            self._r[k, j] = coefficient
            v = self._blas.axpy(-coefficient, q_k, v)
        return v
