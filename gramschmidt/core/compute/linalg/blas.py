"""
BLAS primitive provider.

Wraps the double precision Level 1/2 routines exposed by SciPy
(scipy.linalg.blas) behind the LinalgPrimitives protocol:

    dot   -> ddot
    norm2 -> dnrm2
    axpy  -> daxpy
    gemv  -> dgemv

SciPy's f2py wrappers accept strided views and copy them to contiguous
storage when needed, so column slices of either layout can be passed
directly.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg.blas import get_blas_funcs


class BlasPrimitives:
    """
    Double precision BLAS primitives via SciPy.

    Implements the LinalgPrimitives protocol. Stateless apart from the
    resolved routine handles, so one instance can be shared by any number
    of engines.
    """

    def __init__(self):
        self._dot, self._nrm2, self._axpy, self._gemv = get_blas_funcs(
            ('dot', 'nrm2', 'axpy', 'gemv'), dtype=np.float64
        )

    @property
    def name(self) -> str:
        return 'scipy_blas'

    def dot(self, u: NDArray[np.float64], v: NDArray[np.float64]) -> float:
        return float(self._dot(u, v))

    def norm2(self, v: NDArray[np.float64]) -> float:
        return float(self._nrm2(v))

    def axpy(
        self,
        alpha: float,
        u: NDArray[np.float64],
        v: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        """v + alpha*u, in place when v is contiguous float64."""
        return self._axpy(u, v, a=alpha)

    def gemv(
        self,
        alpha: float,
        matrix: NDArray[np.float64],
        x: NDArray[np.float64],
        beta: float = 0.0,
        y: NDArray[np.float64] | None = None,
        trans: bool = False,
    ) -> NDArray[np.float64]:
        """alpha*op(matrix) @ x + beta*y."""
        if y is None:
            return self._gemv(alpha, matrix, x, trans=int(trans))
        return self._gemv(alpha, matrix, x, beta=beta, y=y, trans=int(trans))

    def get_info(self) -> dict[str, Any]:
        """Provider information (diagnostic)."""
        import scipy
        return {
            'provider': self.name,
            'library': f'NumPy {np.__version__}, SciPy {scipy.__version__}',
            'precision': 'fp64',
        }


# Shared default provider
DEFAULT_PRIMITIVES = BlasPrimitives()
