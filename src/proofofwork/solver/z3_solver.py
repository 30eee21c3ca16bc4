"""
Z3 SMT solver backend implementation.
"""
import time
from typing import Any, Optional, Dict
import z3

from .result import VerificationResult, SolverResult


class Z3Solver:
    """Z3 solver backend wrapper.

    Formulas on the board are opaque names, so every constant is a Bool.
    """

    name = "z3"

    def __init__(self, timeout_ms: Optional[int] = None):
        """Initialize Z3 solver instance.

        Args:
            timeout_ms: Optional per-check timeout handed to Z3
        """
        self.solver = z3.Solver()
        if timeout_ms is not None:
            self.solver.set("timeout", timeout_ms)
        self._variables: Dict[str, Any] = {}

    def bool_const(self, name: str) -> Any:
        var = self._variables.get(name)
        if var is None:
            var = z3.Bool(name)
            self._variables[name] = var
        return var

    def mk_and(self, *args: Any) -> Any:
        return z3.And(*args)

    def mk_implies(self, lhs: Any, rhs: Any) -> Any:
        return z3.Implies(lhs, rhs)

    def mk_not(self, arg: Any) -> Any:
        return z3.Not(arg)

    def add_constraint(self, constraint: Any) -> None:
        self.solver.add(constraint)

    def check_sat(self) -> VerificationResult:
        """Check satisfiability of constraints.

        Returns:
            VerificationResult; unsat means the negated goal is refuted
        """
        start_time = time.time()
        result = self.solver.check()
        elapsed_ms = (time.time() - start_time) * 1000

        if result == z3.unsat:
            return VerificationResult(
                proven=True,
                solver_time_ms=elapsed_ms,
                solver_name=self.name,
                result=SolverResult.UNSAT
            )
        elif result == z3.sat:
            return VerificationResult(
                proven=False,
                countermodel=self._model_to_dict(self.solver.model()),
                solver_time_ms=elapsed_ms,
                solver_name=self.name,
                result=SolverResult.SAT
            )
        else:
            return VerificationResult(
                proven=False,
                solver_time_ms=elapsed_ms,
                solver_name=self.name,
                result=SolverResult.UNKNOWN
            )

    def get_model(self) -> Optional[Dict[str, Any]]:
        """Extract a model if the current assertions are satisfiable."""
        if self.solver.check() != z3.sat:
            return None
        return self._model_to_dict(self.solver.model())

    @staticmethod
    def _model_to_dict(model: Any) -> Dict[str, Any]:
        result = {}
        for decl in model:
            value = model[decl]
            if z3.is_true(value):
                result[decl.name()] = True
            elif z3.is_false(value):
                result[decl.name()] = False
            else:
                result[decl.name()] = str(value)
        return result

    def push(self) -> None:
        self.solver.push()

    def pop(self) -> None:
        self.solver.pop()

    def reset(self) -> None:
        """Reset solver state and forget declared constants."""
        self.solver.reset()
        self._variables.clear()
