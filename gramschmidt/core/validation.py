"""
Input validation for matrices entering a factorization.

Every public entry point runs its input through these checks once, so
engines can assume a finite, 2D, tall-or-square float64 array. Each
validator checks one property and raises with the parameter name and
the offending values in the message; nothing is silently repaired
beyond conversion to float64.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from gramschmidt.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like. Rejects inputs that result in object dtype
    (mixed types) or in a non-numeric dtype. The physical memory layout
    of an ndarray input is preserved.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    # All factorizations run in double precision
    if result.dtype != np.float64:
        result = result.astype(np.float64, order='K')

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}",
            shape=tuple(array.shape),
        )


def check_tall(n_rows: int, n_cols: int, name: str) -> None:
    """
    Verify a shape describes a non-empty tall-or-square matrix.

    Args:
        n_rows: Number of rows (m)
        n_cols: Number of columns (n)
        name: Parameter name for error messages

    Raises:
        DimensionError: If m < n or either dimension is not positive
    """
    if n_rows < 1 or n_cols < 1:
        raise DimensionError(
            f"{name}: dimensions must be positive, got shape ({n_rows}, {n_cols})",
            shape=(n_rows, n_cols),
        )
    if n_rows < n_cols:
        raise DimensionError(
            f"{name}: requires rows >= columns, got shape ({n_rows}, {n_cols})",
            shape=(n_rows, n_cols),
        )


def check_shape(
    array: NDArray[np.floating[Any]],
    expected: tuple[int, int],
    name: str,
) -> None:
    """
    Verify array has exactly the expected shape.

    Args:
        array: Array to check
        expected: Required shape
        name: Parameter name for error messages

    Raises:
        DimensionError: If shapes differ
    """
    if tuple(array.shape) != tuple(expected):
        raise DimensionError(
            f"{name}: expected shape {tuple(expected)}, got {tuple(array.shape)}",
            shape=tuple(array.shape),
            expected_shape=tuple(expected),
        )
