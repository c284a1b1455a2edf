"""
Core protocols for gramschmidt.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so a
caller can plug in their own primitive provider without inheriting from
anything in this package.

Design Principles:
    - Minimal contracts: prescribe only what the algorithms call
    - Double precision throughout: every primitive takes and returns float64
"""

from typing import Protocol, Any, runtime_checkable
import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class LinalgPrimitives(Protocol):
    """
    Linear-algebra primitives consumed by the orthogonalization kernels.

    Implementations must deliver IEEE-754 double precision results with
    standard BLAS numerical behavior. Vector and matrix arguments may be
    strided views of a larger buffer; an implementation is free to copy
    them before handing them to the underlying library.
    """

    def dot(self, u: NDArray[np.float64], v: NDArray[np.float64]) -> float:
        """Inner product uᵀv."""
        ...

    def norm2(self, v: NDArray[np.float64]) -> float:
        """Euclidean norm ‖v‖₂ (never negative)."""
        ...

    def axpy(
        self,
        alpha: float,
        u: NDArray[np.float64],
        v: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        """
        Compute v + alpha*u.

        Updates v in place when v is a contiguous float64 vector.
        Callers must use the returned array.
        """
        ...

    def gemv(
        self,
        alpha: float,
        matrix: NDArray[np.float64],
        x: NDArray[np.float64],
        beta: float = 0.0,
        y: NDArray[np.float64] | None = None,
        trans: bool = False,
    ) -> NDArray[np.float64]:
        """Compute alpha*op(matrix) @ x + beta*y, op transposing if trans."""
        ...


@runtime_checkable
class GramSchmidt(Protocol):
    """
    Capability interface shared by the three orthogonalization engines.

    An engine is bound to a shape at construction and owns its Q and R
    buffers. compute() may be called repeatedly with matrices of that
    shape; every call fully overwrites both factors.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{method}', e.g. 'cpu_cgs', 'cpu_mgs', 'cpu_cgs2'
        """
        ...

    @property
    def shape(self) -> tuple[int, int]:
        """Shape (m, n) of the matrices this engine factorizes."""
        ...

    def compute(self, a: Any) -> None:
        """
        Factorize a into Q and R.

        Raises:
            DimensionError: If a does not have the allocated shape
            RankDeficientError: If a column is numerically dependent on
                the columns before it
        """
        ...

    @property
    def q(self) -> NDArray[np.float64]:
        """Read-only m x n orthonormal factor."""
        ...

    @property
    def r(self) -> NDArray[np.float64]:
        """Read-only n x n upper-triangular factor."""
        ...
