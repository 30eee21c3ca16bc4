"""
Abstract interface for the solver capability used by the verification engine.
"""
from typing import Protocol, Any, Callable, Optional, Dict
from .result import VerificationResult


class SolverBackend(Protocol):
    """Protocol for the propositional solvers the verification engine drives.

    The engine only ever needs boolean constants, the four connectives a
    board can express, and a satisfiability check, so a deterministic stub
    can stand in for Z3 in tests.
    """

    name: str

    def bool_const(self, name: str) -> Any:
        """Return the boolean constant for a formula name, declaring it once."""
        ...

    def mk_and(self, *args: Any) -> Any:
        ...

    def mk_implies(self, lhs: Any, rhs: Any) -> Any:
        ...

    def mk_not(self, arg: Any) -> Any:
        ...

    def add_constraint(self, constraint: Any) -> None:
        """Assert a constraint in the current scope."""
        ...

    def check_sat(self) -> VerificationResult:
        """Check satisfiability of added constraints.

        Returns:
            VerificationResult with proven=True only for unsat
        """
        ...

    def get_model(self) -> Optional[Dict[str, Any]]:
        ...

    def push(self) -> None:
        """Push a new assertion scope."""
        ...

    def pop(self) -> None:
        """Pop the most recent assertion scope."""
        ...

    def reset(self) -> None:
        """Reset the solver state, clearing all constraints."""
        ...


SolverFactory = Callable[[], SolverBackend]
