"""
Exceptions raised by gramschmidt.

Everything derives from GramSchmidtError. Input problems are
ValidationError (DimensionError for shapes), breakdown during the
column loop is RankDeficientError, and reading factors that were never
produced is NotComputedError. Each carries the values needed to
diagnose it as attributes.
"""


class GramSchmidtError(Exception):
    """Base exception for all gramschmidt errors."""
    pass


class ValidationError(GramSchmidtError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a matrix is wider than it is tall, or when the matrix
    passed to compute() does not have the shape the engine was
    allocated for.

    Attributes:
        shape: The offending shape, if known
        expected_shape: The shape that was required, if known
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, ...] | None = None,
        expected_shape: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.shape = shape
        self.expected_shape = expected_shape


class NumericalError(GramSchmidtError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class RankDeficientError(NumericalError):
    """
    A column is numerically dependent on the columns before it.

    Raised when the norm of a column's residual, after all projection
    passes, falls at or below the rank-deficiency tolerance.

    Attributes:
        column: Index of the offending column
        residual_norm: Norm of the orthogonalized residual
        tolerance: Tolerance the norm was compared against
    """

    def __init__(
        self,
        message: str,
        column: int,
        residual_norm: float | None = None,
        tolerance: float | None = None
    ):
        super().__init__(message)
        self.column = column
        self.residual_norm = residual_norm
        self.tolerance = tolerance


class NotComputedError(GramSchmidtError):
    """
    Factors were read before a successful compute().

    Q and R are only meaningful after compute() has returned without
    error. A failed call leaves them incomplete.

    Attributes:
        state: Engine state at the time of access
    """

    def __init__(self, message: str, state: str | None = None):
        super().__init__(message)
        self.state = state
