"""
Linear algebra primitives for gramschmidt.

The orthogonalization kernels never call a BLAS routine directly. They go
through a LinalgPrimitives provider, by default BlasPrimitives backed by
scipy.linalg.blas.
"""

from gramschmidt.core.compute.linalg.blas import BlasPrimitives, DEFAULT_PRIMITIVES

__all__ = [
    "BlasPrimitives",
    "DEFAULT_PRIMITIVES",
]
