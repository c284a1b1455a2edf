"""
QR Design.

Design wraps the matrix to be factorized after validation. It records the
shape, physical layout and scale of A, which the engines need to allocate
buffers and to set the rank-deficiency tolerance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from gramschmidt.core.compute.layout import MatrixLayout
from gramschmidt.core.validation import check_array, check_2d, check_finite, check_tall


@dataclass(frozen=True)
class QRDesign:
    """
    Validated input matrix for a QR factorization.

    Immutable after construction. The matrix is borrowed: no copy is made
    when the input already is a float64 ndarray.

    Construction:
        QRDesign.from_array(A)
    """
    _A: NDArray[np.float64]
    _m: int
    _n: int
    _layout: MatrixLayout
    _frobenius_norm: float

    @classmethod
    def from_array(cls, A: ArrayLike, name: str = 'A') -> QRDesign:
        """
        Build a design from any array-like.

        Raises:
            ValidationError: If A is non-numeric or contains NaN/Inf
            DimensionError: If A is not 2D, is empty, or has more columns
                than rows
        """
        A = check_array(A, name)
        check_2d(A, name)
        m, n = A.shape
        check_tall(m, n, name)
        check_finite(A, name)

        return cls(
            _A=A,
            _m=m,
            _n=n,
            _layout=MatrixLayout.of(A),
            _frobenius_norm=float(np.linalg.norm(A, 'fro')),
        )

    # === Properties ===

    @property
    def A(self) -> NDArray[np.float64]:
        """Matrix to factorize (m x n)."""
        return self._A

    @property
    def m(self) -> int:
        """Number of rows."""
        return self._m

    @property
    def n(self) -> int:
        """Number of columns."""
        return self._n

    @property
    def shape(self) -> tuple[int, int]:
        return (self._m, self._n)

    @property
    def layout(self) -> MatrixLayout:
        """Physical layout of A."""
        return self._layout

    @property
    def frobenius_norm(self) -> float:
        """‖A‖_F."""
        return self._frobenius_norm

    @property
    def metadata(self) -> dict[str, Any]:
        return {'m': self._m, 'n': self._n, 'layout': self._layout.name}
