"""
Tolerance tiers and the rank-deficiency threshold.

Defines precision expectations for the three orthogonalization methods:
- CGS: loses orthogonality proportionally to cond(A)², loosest tier
- MGS: loses orthogonality proportionally to cond(A)
- CGS2: orthogonal to working precision for numerically full-rank input

Used by the test suite, the benchmark script, and QRSolution.is_orthogonal().
The orthogonality tiers describe well-conditioned input; on ill-conditioned
input only the ordering CGS2 <= MGS <= CGS is guaranteed.
"""

from dataclasses import dataclass
import numpy as np


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# A column breaks down when its residual norm is at or below
# RANK_TOLERANCE_FACTOR * max(m, n) * eps * ‖A‖_F.
RANK_TOLERANCE_FACTOR: float = 10.0


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# ‖I - QᵀQ‖_F bounds
CGS_ORTHOGONALITY = ToleranceTier(
    rtol=0.0,
    atol=1e-8,
    name='cgs_orthogonality',
    description='Classical Gram-Schmidt, well-conditioned input',
)

MGS_ORTHOGONALITY = ToleranceTier(
    rtol=0.0,
    atol=1e-10,
    name='mgs_orthogonality',
    description='Modified Gram-Schmidt, well-conditioned input',
)

CGS2_ORTHOGONALITY = ToleranceTier(
    rtol=0.0,
    atol=1e-12,
    name='cgs2_orthogonality',
    description='Reorthogonalized Gram-Schmidt, working precision',
)

# max|A - QR| <= rtol * ‖A‖_F + atol, every method
RECONSTRUCTION = ToleranceTier(
    rtol=1e-12,
    atol=0.0,
    name='reconstruction',
    description='A ≈ QR, scaled by the Frobenius norm of A',
)


def select_tolerance(method: str) -> ToleranceTier:
    """Select the orthogonality tier for a method name ('cgs', 'mgs', 'cgs2')."""
    tiers = {
        'cgs': CGS_ORTHOGONALITY,
        'mgs': MGS_ORTHOGONALITY,
        'cgs2': CGS2_ORTHOGONALITY,
    }
    try:
        return tiers[method]
    except KeyError:
        raise ValueError(
            f"Unknown method: {method!r}. Valid options: {sorted(tiers)}"
        ) from None


def default_rank_tolerance(n_rows: int, n_cols: int, frobenius_norm: float) -> float:
    """
    Rank-deficiency threshold relative to the size and scale of A.

    Same form as the rank tolerance used for pivoted QR in least squares
    (max(n, p) * eps * ‖X‖_F), scaled by RANK_TOLERANCE_FACTOR.

    Args:
        n_rows: Number of rows of A
        n_cols: Number of columns of A
        frobenius_norm: ‖A‖_F

    Returns:
        Absolute threshold for a column's residual norm
    """
    return RANK_TOLERANCE_FACTOR * max(n_rows, n_cols) * EPSILON_64 * frobenius_norm
