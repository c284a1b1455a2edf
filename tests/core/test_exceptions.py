"""
Tests for the gramschmidt exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via GramSchmidtError)
    - Diagnostic attributes on DimensionError, RankDeficientError,
      NotComputedError
    - Default attribute values (None for optional attributes)
"""

import pytest

from gramschmidt.core.exceptions import (
    DimensionError,
    GramSchmidtError,
    NotComputedError,
    NumericalError,
    RankDeficientError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via GramSchmidtError."""

    def test_validation_error_is_gramschmidt_error(self):
        with pytest.raises(GramSchmidtError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_rank_deficient_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise RankDeficientError("dependent column", column=2)

    def test_rank_deficient_is_gramschmidt_error(self):
        with pytest.raises(GramSchmidtError):
            raise RankDeficientError("dependent column", column=2)

    def test_rank_deficient_is_not_validation_error(self):
        err = RankDeficientError("dependent column", column=2)
        assert not isinstance(err, ValidationError)

    def test_not_computed_is_gramschmidt_error(self):
        with pytest.raises(GramSchmidtError):
            raise NotComputedError("not yet")


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionError:

    def test_attributes(self):
        err = DimensionError("A: bad", shape=(2, 3), expected_shape=(3, 2))
        assert str(err) == "A: bad"
        assert err.shape == (2, 3)
        assert err.expected_shape == (3, 2)

    def test_defaults_none(self):
        err = DimensionError("A: bad")
        assert err.shape is None
        assert err.expected_shape is None


class TestRankDeficientError:

    def test_all_attributes(self):
        err = RankDeficientError(
            "column 3 is dependent",
            column=3,
            residual_norm=1e-17,
            tolerance=1e-14,
        )
        assert str(err) == "column 3 is dependent"
        assert err.column == 3
        assert err.residual_norm == 1e-17
        assert err.tolerance == 1e-14

    def test_column_required(self):
        with pytest.raises(TypeError):
            RankDeficientError("missing column")

    def test_optional_defaults(self):
        err = RankDeficientError("dependent", column=0)
        assert err.residual_norm is None
        assert err.tolerance is None


class TestNotComputedError:

    def test_state_attribute(self):
        err = NotComputedError("factors invalid", state='failed')
        assert err.state == 'failed'

    def test_state_default(self):
        assert NotComputedError("factors invalid").state is None
