"""
Tests for reference matrices and the shared projection step.
"""

import numpy as np
import pytest

from gramschmidt.core.compute.linalg.blas import DEFAULT_PRIMITIVES
from gramschmidt.core.exceptions import ValidationError
from gramschmidt.qr.backends import project_out
from gramschmidt.qr.datasets import LARGE, SMALL, lauchli


class TestLauchli:

    def test_shape(self):
        assert lauchli(4, 1e-3).shape == (5, 4)

    def test_entries(self):
        expected = np.array([
            [1.0, 1.0, 1.0],
            [0.5, 0.0, 0.0],
            [0.0, 0.5, 0.0],
            [0.0, 0.0, 0.5],
        ])
        np.testing.assert_array_equal(lauchli(3, 0.5), expected)

    def test_single_column(self):
        np.testing.assert_array_equal(lauchli(1, 2.0), [[1.0], [2.0]])

    def test_negative_epsilon_allowed(self):
        assert lauchli(2, -1e-4)[1, 0] == -1e-4

    def test_zero_columns_rejected(self):
        with pytest.raises(ValidationError, match="at least 1"):
            lauchli(0, 1e-8)

    def test_zero_epsilon_rejected(self):
        with pytest.raises(ValidationError, match="non-zero"):
            lauchli(3, 0.0)


class TestReferenceMatrices:

    @pytest.mark.parametrize("A", [SMALL, LARGE], ids=['small', 'large'])
    def test_full_rank(self, A):
        assert np.linalg.matrix_rank(A) == A.shape[1]

    def test_shapes(self):
        assert SMALL.shape == (4, 4)
        assert LARGE.shape == (6, 6)


class TestProjectOut:

    def test_removes_basis_components(self, rng):
        basis, _ = np.linalg.qr(rng.standard_normal((10, 3)))
        v = rng.standard_normal(10)

        coefficients, residual = project_out(DEFAULT_PRIMITIVES, basis, v.copy())

        np.testing.assert_allclose(coefficients, basis.T @ v, atol=1e-14)
        np.testing.assert_allclose(basis.T @ residual, 0.0, atol=1e-14)
        np.testing.assert_allclose(residual + basis @ coefficients, v, atol=1e-14)

    def test_column_major_basis(self, rng):
        basis, _ = np.linalg.qr(rng.standard_normal((8, 2)))
        basis = np.asfortranarray(basis)
        v = rng.standard_normal(8)

        coefficients, residual = project_out(DEFAULT_PRIMITIVES, basis, v.copy())

        assert coefficients.shape == (2,)
        assert residual.shape == (8,)
        np.testing.assert_allclose(basis.T @ residual, 0.0, atol=1e-14)

    def test_vector_in_span(self):
        basis = np.eye(4)[:, :2]
        coefficients, residual = project_out(DEFAULT_PRIMITIVES, basis, np.array([3.0, -1.0, 0.0, 0.0]))
        np.testing.assert_array_equal(coefficients, [3.0, -1.0])
        np.testing.assert_array_equal(residual, np.zeros(4))
