"""
Reference matrices for QR validation and examples.

lauchli() builds the classic ill-conditioned test matrix used to compare
the stability of the three orthogonalization methods. SMALL and LARGE are
fixed full-rank matrices with known-good factorizations.
"""

import numpy as np
from numpy.typing import NDArray

from gramschmidt.core.exceptions import ValidationError


def lauchli(n: int, epsilon: float) -> NDArray[np.float64]:
    """
    Läuchli matrix of n columns.

    The (n+1) x n matrix whose first row is all ones and whose remaining
    n x n block is epsilon times the identity:

        [[1, 1, ..., 1],
         [ε, 0, ..., 0],
         [0, ε, ..., 0],
         ...
         [0, 0, ..., ε]]

    For ε near sqrt(machine epsilon), 1 + ε² rounds to 1 and classical
    Gram-Schmidt loses orthogonality almost completely.

    Args:
        n: Number of columns (>= 1)
        epsilon: Sub-diagonal scale (non-zero)

    Returns:
        (n+1) x n float64 array
    """
    if n < 1:
        raise ValidationError(f"n: must be at least 1, got {n}")
    if epsilon == 0:
        raise ValidationError("epsilon: must be non-zero, got 0")

    matrix = np.zeros((n + 1, n), dtype=np.float64)
    matrix[0, :] = 1.0
    matrix[1:, :] = epsilon * np.eye(n)
    return matrix


# Upper-Hessenberg-like 4 x 4 with a dense second column
SMALL = np.array([
    [2.0, 0.5, 0.0, 0.0],
    [0.0, 0.3, 0.0, 0.0],
    [0.0, 1.0, 0.7, 0.0],
    [0.0, 0.0, 0.0, 3.0],
])

# Dense 6 x 6 with entries spanning three orders of magnitude
LARGE = np.array([
    [-4.079764601288893, 4.831491499921403, -2.9560001027996132, -0.02239325297550033, -0.2672544204261703, -0.07718850306444144],
    [1.2917480323712418, 0.030479388871438983, 0.604549448561548, 0.013409783846041783, 0.037439247530467186, 0.03153579130305008],
    [-47.584641085515464, 5.501371846864031, 41.39822251681311, -33.69079455346558, 43.13388644338738, 68.7695035292409],
    [2.5268795799504997, 25.418530275775225, 33.473125141381374, 77.3391516894698, -44.091836957161426, 45.10932299622911],
    [-20.383209804181938, -19.163209972229616, 0.09795435026201423, -53.296988576627484, -88.482334971421, 16.757575995918756],
    [62.270964677492124, -75.82678462673792, -0.6889077708993588, 2.2569901796884064, 9.21906803233946, 44.891962279862234],
])
