"""
Accuracy diagnostics for a computed factorization.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray


def orthogonality_loss(Q: NDArray[np.floating[Any]]) -> float:
    """
    Departure of Q from orthonormality, ‖I - QᵀQ‖_F.

    Args:
        Q: m x n factor

    Returns:
        Frobenius norm of I - QᵀQ (0 for exactly orthonormal columns)
    """
    n = Q.shape[1]
    return float(np.linalg.norm(np.eye(n) - Q.T @ Q, 'fro'))


def reconstruction_error(
    A: NDArray[np.floating[Any]],
    Q: NDArray[np.floating[Any]],
    R: NDArray[np.floating[Any]],
    scale: float | None = None,
) -> float:
    """
    Largest absolute entry of A - QR, relative to ‖A‖_F.

    Args:
        A: Factorized matrix
        Q: Orthonormal factor
        R: Upper-triangular factor
        scale: ‖A‖_F if already known

    Returns:
        max|A - QR| / ‖A‖_F, or the unscaled maximum if A is zero
    """
    if scale is None:
        scale = float(np.linalg.norm(A, 'fro'))
    err = float(np.max(np.abs(A - Q @ R)))
    if scale == 0:
        return err
    return err / scale
