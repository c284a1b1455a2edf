"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, float64 coercion, layout preservation, rejection
    - check_finite: NaN/Inf detection
    - check_2d: dimensionality check
    - check_tall: m >= n and positive dimensions
    - check_shape: exact shape match
"""

import numpy as np
import pytest

from gramschmidt.core.exceptions import DimensionError, ValidationError
from gramschmidt.core.validation import (
    check_2d,
    check_array,
    check_finite,
    check_shape,
    check_tall,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([[1, 2], [3, 4]], "A")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [[1.0, 2.0], [3.0, 4.0]])

    def test_float32_promoted_to_float64(self):
        arr = np.ones((3, 2), dtype=np.float32)
        assert check_array(arr, "A").dtype == np.float64

    def test_float64_passthrough_is_not_copied(self):
        arr = np.ones((3, 2))
        assert check_array(arr, "A") is arr

    def test_fortran_layout_preserved_on_promotion(self):
        arr = np.asfortranarray(np.ones((3, 2), dtype=np.int64))
        result = check_array(arr, "A")
        assert result.flags['F_CONTIGUOUS']
        assert not result.flags['C_CONTIGUOUS']

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "A")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([["a", "b"], ["c", "d"]], "A")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex dtype"):
            check_array(np.ones((2, 2), dtype=complex), "A")

    def test_name_in_message(self):
        with pytest.raises(ValidationError, match="my_matrix"):
            check_array(["x"], "my_matrix")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.ones((2, 2)), "A")

    def test_nan_counted(self):
        arr = np.array([[1.0, np.nan], [np.nan, 2.0]])
        with pytest.raises(ValidationError, match="2 NaN, 0 Inf"):
            check_finite(arr, "A")

    def test_inf_counted(self):
        arr = np.array([[1.0, np.inf], [-np.inf, 2.0]])
        with pytest.raises(ValidationError, match="0 NaN, 2 Inf"):
            check_finite(arr, "A")


# ═══════════════════════════════════════════════════════════════════════
# Dimension checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheck2d:

    def test_2d_passes(self):
        check_2d(np.ones((3, 2)), "A")

    def test_1d_rejected(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.ones(3), "A")

    def test_3d_rejected_with_shape(self):
        with pytest.raises(DimensionError) as exc_info:
            check_2d(np.ones((2, 2, 2)), "A")
        assert exc_info.value.shape == (2, 2, 2)


class TestCheckTall:

    def test_square_passes(self):
        check_tall(4, 4, "A")

    def test_tall_passes(self):
        check_tall(10, 3, "A")

    def test_wide_rejected(self):
        with pytest.raises(DimensionError, match="rows >= columns") as exc_info:
            check_tall(2, 3, "A")
        assert exc_info.value.shape == (2, 3)

    @pytest.mark.parametrize("shape", [(0, 0), (3, 0), (0, 3)])
    def test_empty_rejected(self, shape):
        with pytest.raises(DimensionError, match="positive"):
            check_tall(*shape, "A")


class TestCheckShape:

    def test_match_passes(self):
        check_shape(np.ones((3, 2)), (3, 2), "A")

    def test_mismatch_rejected(self):
        with pytest.raises(DimensionError) as exc_info:
            check_shape(np.ones((3, 2)), (4, 2), "A")
        assert exc_info.value.shape == (3, 2)
        assert exc_info.value.expected_shape == (4, 2)
