"""
Solver outcome types.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any


class SolverResult(Enum):
    """Result from SMT solver check."""
    SAT = "sat"
    UNSAT = "unsat"
    UNKNOWN = "unknown"


@dataclass
class VerificationResult:
    """Outcome of a refutation query against a solver backend.

    A goal is proven when its negation, asserted together with the
    assumptions and the implication derived from the board, is
    unsatisfiable. Anything else (sat, unknown) is fail-closed.

    Attributes:
        proven: True only if the solver reported unsat
        countermodel: Assignment making every assertion true (sat case)
        solver_time_ms: Time taken by solver in milliseconds
        solver_name: Name of the solver backend used
        result: Raw solver result (SAT/UNSAT/UNKNOWN)
    """
    proven: bool
    countermodel: Optional[Dict[str, Any]] = None
    solver_time_ms: float = 0.0
    solver_name: str = "unknown"
    result: SolverResult = SolverResult.UNKNOWN

    def __str__(self) -> str:
        if self.proven:
            return f"Goal proven ({self.solver_name}, {self.solver_time_ms:.2f}ms)"
        if self.result == SolverResult.UNKNOWN:
            return f"Goal not proven: solver gave up ({self.solver_name}, {self.solver_time_ms:.2f}ms)"
        model_str = ", ".join(f"{k}={v}" for k, v in (self.countermodel or {}).items())
        return f"Goal not proven: {model_str} ({self.solver_name}, {self.solver_time_ms:.2f}ms)"
