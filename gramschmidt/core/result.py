"""
Result envelope returned by GramSchmidtEngine.solve().

The payload type P is the method-specific part (QRParams for a QR
factorization); timing, warnings and metadata such as the rank tolerance
are carried alongside it. Results are frozen once built.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for factorizations.

    Type Parameters:
        P: The payload type

    Attributes:
        params: Payload (factors and diagnostics)
        info: Structured metadata (method, rank tolerance, shape)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=QRParams(q=Q, r=R, ...),
        ...     info={'method': 'cgs2', 'rank_tol': 1e-14},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_cgs2'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
