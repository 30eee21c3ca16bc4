"""Solver abstraction layer for proof verification.

Note: the Python Z3 bindings are optional at import time. Importing this
package should not require Z3 unless you explicitly use the Z3 backend;
the verification engine falls back to its connectivity check without it.
"""

from .base import SolverBackend, SolverFactory
from .result import VerificationResult, SolverResult

try:
    from .z3_solver import Z3Solver  # type: ignore
except Exception:  # pragma: no cover
    Z3Solver = None  # type: ignore

__all__ = [
    "SolverBackend",
    "SolverFactory",
    "VerificationResult",
    "SolverResult",
    "Z3Solver",
]
