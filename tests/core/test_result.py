"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings and has_warning()
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from gramschmidt.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "cgs"},
            timing={"total_seconds": 0.01},
            backend_name="cpu_cgs",
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "cgs"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_cgs"

    def test_warnings_default_empty(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert result.warnings == ()

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "cpu_mgs"

    def test_has_warning(self):
        result = Result(
            params=FakeParams(1.0),
            info={},
            timing=None,
            backend_name="cpu",
            warnings=("Loss of orthogonality: 1e-3",),
        )
        assert result.has_warning("orthogonality")
        assert not result.has_warning("converge")

    def test_engine_result(self):
        from gramschmidt.qr.backends import ModifiedGramSchmidt
        from gramschmidt.qr.datasets import SMALL
        from gramschmidt.qr.design import QRDesign
        from gramschmidt.qr.solution import QRParams

        design = QRDesign.from_array(SMALL)
        result = ModifiedGramSchmidt.from_matrix(design).solve(design)
        assert isinstance(result.params, QRParams)
        assert result.backend_name == "cpu_mgs"
        assert result.info["shape"] == (4, 4)
        assert not result.has_warning("orthogonality")
