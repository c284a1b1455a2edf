"""
Gram-Schmidt backends.

Exactly three methods, all sharing the engine in _common:
    ClassicalGramSchmidt: batched projection against the original column
    ModifiedGramSchmidt: sequential projection against the updated residual
    ReorthogonalizedGramSchmidt: classical projection applied twice
"""

from gramschmidt.qr.backends._common import EngineState, GramSchmidtEngine
from gramschmidt.qr.backends.classical import ClassicalGramSchmidt, project_out
from gramschmidt.qr.backends.modified import ModifiedGramSchmidt
from gramschmidt.qr.backends.reorthogonalized import ReorthogonalizedGramSchmidt

METHODS: dict[str, type[GramSchmidtEngine]] = {
    'cgs': ClassicalGramSchmidt,
    'mgs': ModifiedGramSchmidt,
    'cgs2': ReorthogonalizedGramSchmidt,
}

__all__ = [
    "ClassicalGramSchmidt",
    "ModifiedGramSchmidt",
    "ReorthogonalizedGramSchmidt",
    "EngineState",
    "METHODS",
    "project_out",
]
