"""
QR solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.linalg import solve_triangular

from gramschmidt.core.compute.tolerances import select_tolerance
from gramschmidt.core.exceptions import DimensionError
from gramschmidt.core.result import Result
from gramschmidt.core.validation import check_array, check_finite

if TYPE_CHECKING:
    from gramschmidt.qr.design import QRDesign


@dataclass(frozen=True)
class QRParams:
    """
    Parameter payload for a QR factorization.

    This is the immutable data computed by backends. q and r are copies,
    independent of the engine's buffers.
    """
    q: NDArray[np.float64]
    r: NDArray[np.float64]
    orthogonality_loss: float
    reconstruction_error: float


@dataclass
class QRSolution:
    """
    User-facing factorization results.

    Wraps the backend Result and provides accessors for the factors, their
    accuracy diagnostics, and least-squares solves.
    """
    _result: Result[QRParams]
    _design: 'QRDesign'

    @property
    def q(self) -> NDArray[np.float64]:
        """Orthonormal factor (m x n)."""
        return self._result.params.q

    @property
    def r(self) -> NDArray[np.float64]:
        """Upper-triangular factor (n x n)."""
        return self._result.params.r

    @property
    def method(self) -> str:
        return self._result.info['method']

    @property
    def orthogonality_loss(self) -> float:
        """‖I - QᵀQ‖_F."""
        return self._result.params.orthogonality_loss

    @property
    def reconstruction_error(self) -> float:
        """max|A - QR| / ‖A‖_F."""
        return self._result.params.reconstruction_error

    @property
    def rank_tol(self) -> float:
        """Rank-deficiency threshold the factorization was checked against."""
        return self._result.info['rank_tol']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def is_orthogonal(self) -> bool:
        """True if the loss of orthogonality is within the method's tolerance tier."""
        return self.orthogonality_loss <= select_tolerance(self.method).atol

    def solve(self, b: ArrayLike) -> NDArray[np.float64]:
        """
        Least-squares solution of A x ≈ b.

        Solves min_x ||b - Ax||² as x = R⁻¹ Qᵀb by back substitution.

        Args:
            b: Right-hand side, shape (m,) or (m, k)

        Returns:
            x with shape (n,) or (n, k)

        Raises:
            ValidationError: If b is non-numeric or contains NaN/Inf
            DimensionError: If b does not have m rows
        """
        b_arr = check_array(b, 'b')
        if b_arr.ndim not in (1, 2):
            raise DimensionError(
                f"b: expected 1D or 2D array, got {b_arr.ndim}D with shape {b_arr.shape}",
                shape=tuple(b_arr.shape),
            )
        if b_arr.shape[0] != self._design.m:
            raise DimensionError(
                f"b: expected {self._design.m} rows, got {b_arr.shape[0]}",
                shape=tuple(b_arr.shape),
                expected_shape=(self._design.m,),
            )
        check_finite(b_arr, 'b')

        Qtb = self.q.T @ b_arr
        return solve_triangular(self.r, Qtb, lower=False)

    def summary(self) -> str:
        """Generate a text report of the factorization."""
        tier = select_tolerance(self.method)
        lines = [
            "QR Factorization (Gram-Schmidt)",
            "=" * 60,
            f"Method: {self.method}",
            f"Shape: {self._design.m} x {self._design.n}",
            f"Layout: {self.info['layout']}",
            f"Rank tolerance: {self.rank_tol:.3e}",
            "",
            "Accuracy:",
            "-" * 60,
            f"  ‖I - QᵀQ‖_F:        {self.orthogonality_loss:12.3e}"
            f"  (tier {tier.atol:.0e})",
            f"  max|A - QR| / ‖A‖_F: {self.reconstruction_error:12.3e}",
            "-" * 60,
        ]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"QRSolution(m={self._design.m}, n={self._design.n}, "
            f"method={self.method!r}, orthogonality_loss={self.orthogonality_loss:.2e})"
        )
