"""
Shared engine for the Gram-Schmidt backends.

The engine owns the output buffers Q (m x n) and R (n x n), runs the column
loop, detects breakdown and tracks whether the buffers hold a valid
factorization. A method contributes only its column step: given column j of
A, subtract its projections onto Q[:, :j], record the coefficients in
R[:j, j], and return the residual.
"""

from __future__ import annotations

from enum import Enum
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from gramschmidt.core.compute.layout import MatrixLayout
from gramschmidt.core.compute.linalg.blas import DEFAULT_PRIMITIVES
from gramschmidt.core.compute.timing import Timer
from gramschmidt.core.compute.tolerances import default_rank_tolerance, select_tolerance
from gramschmidt.core.exceptions import (
    DimensionError,
    NotComputedError,
    RankDeficientError,
    ValidationError,
)
from gramschmidt.core.protocols import LinalgPrimitives
from gramschmidt.core.result import Result
from gramschmidt.core.validation import check_shape, check_tall
from gramschmidt.qr._diagnostics import orthogonality_loss, reconstruction_error
from gramschmidt.qr.design import QRDesign
from gramschmidt.qr.solution import QRParams


class EngineState(Enum):
    """Lifecycle of an engine's buffers."""
    ALLOCATED = 'allocated'
    COMPUTED = 'computed'
    FAILED = 'failed'


def _read_only(array: NDArray[np.float64]) -> NDArray[np.float64]:
    view = array.view()
    view.flags.writeable = False
    return view


class GramSchmidtEngine:
    """
    Buffer owner and column loop shared by CGS, MGS and CGS2.

    Not used directly: construct one of ClassicalGramSchmidt,
    ModifiedGramSchmidt or ReorthogonalizedGramSchmidt.

    Args:
        n_rows: Number of rows m of the matrices to factorize
        n_cols: Number of columns n (n <= m)
        layout: Memory order of the Q and R buffers
        rank_tol: Absolute rank-deficiency threshold. If None, it is set
            per call from the size and Frobenius norm of the input.
        primitives: LinalgPrimitives provider, BLAS via SciPy by default

    Raises:
        DimensionError: If n_rows < n_cols or a dimension is not positive
        ValidationError: If rank_tol is negative
    """

    method: str = ''

    def __init__(
        self,
        n_rows: int,
        n_cols: int,
        *,
        layout: MatrixLayout = MatrixLayout.ROW_MAJOR,
        rank_tol: float | None = None,
        primitives: LinalgPrimitives | None = None,
    ):
        check_tall(n_rows, n_cols, 'shape')
        if rank_tol is not None and not rank_tol >= 0:
            raise ValidationError(f"rank_tol: must be non-negative, got {rank_tol}")

        self._shape = (int(n_rows), int(n_cols))
        self._layout = layout
        self._q = layout.zeros((n_rows, n_cols))
        self._r = layout.zeros((n_cols, n_cols))
        self._rank_tol = rank_tol
        self._tolerance: float | None = None
        self._blas = primitives if primitives is not None else DEFAULT_PRIMITIVES
        self._state = EngineState.ALLOCATED

    # === Construction ===

    @classmethod
    def from_shape(cls, shape: tuple[int, int], fortran_order: bool = False, **kwargs: Any):
        """
        Allocate an engine for matrices of the given shape.

        Args:
            shape: (m, n) with m >= n
            fortran_order: Allocate Q and R in column-major order
            **kwargs: rank_tol, primitives
        """
        if len(shape) != 2:
            raise DimensionError(
                f"shape: expected (rows, columns), got {tuple(shape)}",
                shape=tuple(shape),
            )
        n_rows, n_cols = shape
        layout = MatrixLayout.from_fortran_order(fortran_order)
        return cls(n_rows, n_cols, layout=layout, **kwargs)

    @classmethod
    def from_matrix(cls, a: ArrayLike | QRDesign, **kwargs: Any):
        """
        Allocate an engine using the shape and memory layout of a sample matrix.

        The sample is only inspected; call compute() to factorize it.
        """
        design = a if isinstance(a, QRDesign) else QRDesign.from_array(a)
        return cls(design.m, design.n, layout=design.layout, **kwargs)

    # === Properties ===

    @property
    def name(self) -> str:
        return f'cpu_{self.method}'

    @property
    def shape(self) -> tuple[int, int]:
        return self._shape

    @property
    def layout(self) -> MatrixLayout:
        return self._layout

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def rank_tol(self) -> float | None:
        """Configured absolute threshold, None when derived per call."""
        return self._rank_tol

    @property
    def tolerance(self) -> float | None:
        """Threshold used by the most recent compute() call."""
        return self._tolerance

    @property
    def q(self) -> NDArray[np.float64]:
        """Read-only m x n orthonormal factor."""
        self._require_computed()
        return _read_only(self._q)

    @property
    def r(self) -> NDArray[np.float64]:
        """Read-only n x n upper-triangular factor."""
        self._require_computed()
        return _read_only(self._r)

    # === Computation ===

    def compute(self, a: ArrayLike | QRDesign) -> None:
        """
        Factorize a into Q and R, overwriting both buffers.

        a may be in either memory layout regardless of the engine's own.

        Raises:
            ValidationError: If a is non-numeric or contains NaN/Inf
            DimensionError: If a does not have the allocated shape
            RankDeficientError: If a column's residual norm is at or
                below the rank tolerance
        """
        # Buffers are invalid until the last column is written
        self._state = EngineState.FAILED

        design = a if isinstance(a, QRDesign) else QRDesign.from_array(a)
        check_shape(design.A, self._shape, 'A')

        A = design.A
        n_cols = self._shape[1]
        tol = self._rank_tol
        if tol is None:
            tol = default_rank_tolerance(design.m, design.n, design.frobenius_norm)
        self._tolerance = tol

        self._r.fill(0.0)

        for j in range(n_cols):
            v = np.array(self._layout.column(A, j), dtype=np.float64)
            v = self._orthogonalize(j, v)

            norm = self._blas.norm2(v)
            if norm <= tol:
                raise RankDeficientError(
                    f"A: column {j} is numerically dependent on columns 0..{j - 1} "
                    f"(residual norm {norm:.3e} <= tolerance {tol:.3e})",
                    column=j,
                    residual_norm=norm,
                    tolerance=tol,
                )

            self._r[j, j] = norm
            self._q[:, j] = v / norm

        self._state = EngineState.COMPUTED

    def _orthogonalize(self, j: int, v: NDArray[np.float64]) -> NDArray[np.float64]:
        """Remove from v its components along Q[:, :j]; fill R[:j, j]."""
        raise NotImplementedError

    def solve(self, design: QRDesign) -> Result[QRParams]:
        """
        Factorize a validated design and package the factors.

        Returns:
            Result containing copies of Q and R plus accuracy diagnostics.
            A warning is attached when the loss of orthogonality exceeds
            the method's tolerance tier.

        Raises:
            DimensionError, RankDeficientError: As for compute()
        """
        timer = Timer()
        timer.start()

        with timer.section('factorization'):
            self.compute(design)

        with timer.section('diagnostics'):
            q = self._q.copy(order='K')
            r = self._r.copy(order='K')
            loss = orthogonality_loss(q)
            recon = reconstruction_error(design.A, q, r, design.frobenius_norm)

        timer.stop()

        tier = select_tolerance(self.method)
        warnings: tuple[str, ...] = ()
        if loss > tier.atol:
            warnings = (
                f"Loss of orthogonality: ‖I - QᵀQ‖_F = {loss:.3e} exceeds the "
                f"{tier.name} tolerance {tier.atol:.0e}. The input is likely "
                f"ill-conditioned; consider method='cgs2'.",
            )

        params = QRParams(
            q=q,
            r=r,
            orthogonality_loss=loss,
            reconstruction_error=recon,
        )

        info: dict[str, Any] = {
            'method': self.method,
            'shape': self._shape,
            'layout': self._layout.name,
            'rank_tol': self._tolerance,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=warnings,
        )

    # === Helpers ===

    def _require_computed(self) -> None:
        if self._state is not EngineState.COMPUTED:
            raise NotComputedError(
                f"{type(self).__name__}: factors are only valid after a successful "
                f"compute() (state is {self._state.value!r})",
                state=self._state.value,
            )

    def __repr__(self) -> str:
        m, n = self._shape
        return (
            f"{type(self).__name__}(m={m}, n={n}, layout={self._layout.name}, "
            f"state={self._state.value})"
        )
