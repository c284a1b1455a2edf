"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from gramschmidt.qr.backends import (
    ClassicalGramSchmidt,
    ModifiedGramSchmidt,
    ReorthogonalizedGramSchmidt,
)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def tall_matrix(rng):
    """Well-conditioned 50 x 8 matrix."""
    return rng.standard_normal((50, 8))


@pytest.fixture
def duplicate_column_matrix():
    """4 x 3 matrix whose last column repeats the first."""
    return np.array([
        [1.0, 2.0, 1.0],
        [0.0, 1.0, 0.0],
        [3.0, 0.0, 3.0],
        [1.0, 1.0, 1.0],
    ])


@pytest.fixture(params=[
    ClassicalGramSchmidt,
    ModifiedGramSchmidt,
    ReorthogonalizedGramSchmidt,
], ids=['cgs', 'mgs', 'cgs2'])
def engine_cls(request):
    """Each of the three engine classes."""
    return request.param
