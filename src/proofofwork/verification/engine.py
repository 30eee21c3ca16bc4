"""Decide whether a board's pieces form a valid proof of its goal.

Three deciders are provided:

- ``verify_level_solution`` checks each wired AND gate with an in-process
  solver (Z3 by default, any ``SolverBackend`` factory may be injected).
- ``verify_connectivity`` accepts the first wired AND gate without asking a
  solver; selected by passing ``solver=None``.
- ``verify_with_external_solver`` renders the refutation script and hands
  it to an SMT solver executable.

None of them mutate their inputs. Anything short of an UNSAT answer,
including solver errors and timeouts, counts as not proven.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence
import logging
import subprocess
import tempfile

from ..game.board import BoardState
from ..game.level import Level
from ..game.pieces import LogicPiece
from ..solver import Z3Solver
from ..solver.base import SolverBackend, SolverFactory
from ..solver.result import SolverResult
from .proof_smt2 import write_refutation_smt2
from .solver_runner import pick_solver, resolve_solver, run_solver
from .wiring import AndGateWiring, find_and_gate_candidates

logger = logging.getLogger(__name__)


def _default_solver() -> SolverBackend:
    if Z3Solver is None:
        raise ImportError("z3-solver not available; pass solver=None for the connectivity check")
    return Z3Solver()


def _entails(backend: SolverBackend, wiring: AndGateWiring, goal: str) -> bool:
    lhs, rhs = (backend.bool_const(name) for name in wiring.inputs)
    r = backend.bool_const(goal)

    backend.push()
    try:
        backend.add_constraint(lhs)
        backend.add_constraint(rhs)
        backend.add_constraint(backend.mk_implies(backend.mk_and(lhs, rhs), r))
        backend.add_constraint(backend.mk_not(r))
        outcome = backend.check_sat()
    finally:
        backend.pop()

    logger.debug("AND gate at %s => %s: %s", wiring.gate, goal, outcome)
    return outcome.result == SolverResult.UNSAT


def verify_level_solution(
    level: Level,
    pieces: Sequence[LogicPiece],
    *,
    solver: Optional[SolverFactory] = _default_solver,
) -> bool:
    """Return True if some AND gate wires P and Q into a goal the solver proves.

    For every wired gate the solver is given P, Q and ``(P and Q) => R``
    for an adjacent goal R, then ``not R``; UNSAT certifies R. Gates are
    tried in piece order until one succeeds.

    Args:
        level: Level being played, used for log context only
        pieces: Current pieces, which may differ from the level's initial board
        solver: Factory for a fresh solver backend, or None to skip the
                solver and accept the first wired gate
    """
    if solver is None:
        return verify_connectivity(level, pieces)

    candidates = find_and_gate_candidates(pieces)
    if not candidates:
        logger.debug("Level %s: no AND gate wired to P, Q and a goal", level.id)
        return False

    backend = solver()
    for wiring in candidates:
        for goal in wiring.goals:
            try:
                proven = _entails(backend, wiring, goal)
            except Exception:
                logger.warning("Solver %s failed on gate at %s",
                               getattr(backend, "name", "?"), wiring.gate, exc_info=True)
                continue
            if proven:
                logger.info("Level %s: proof verified via AND gate at %s", level.id, wiring.gate)
                return True

    logger.info("Level %s: no gate configuration proves the goal", level.id)
    return False


def verify_connectivity(level: Level, pieces: Sequence[LogicPiece]) -> bool:
    """Solver-free check: spatial wiring alone is taken as the proof."""
    candidates = find_and_gate_candidates(pieces)
    if candidates:
        logger.info("Level %s: connections valid via AND gate at %s (no solver)",
                    level.id, candidates[0].gate)
        return True
    return False


@dataclass
class ScriptCheckResult:
    """Outcome of checking a refutation script with a solver executable."""

    proven: bool
    result: SolverResult
    solver_name: str
    solver_time_ms: float = 0.0
    script: str = ""
    raw_stdout: str = ""
    raw_stderr: str = ""


def verify_with_external_solver(
    board: BoardState,
    *,
    solver: Optional[str] = None,
    timeout_s: Optional[float] = None,
) -> ScriptCheckResult:
    """Check ``board_to_refutation_smt(board)`` with an SMT solver binary.

    Args:
        board: Board to check; not modified
        solver: Solver name or path; picked from the environment if None
        timeout_s: Optional wall-clock limit for the solver process
    """
    spec = resolve_solver(solver) if solver else pick_solver()
    if spec is None:
        logger.warning("No SMT solver executable found")
        return ScriptCheckResult(proven=False, result=SolverResult.UNKNOWN, solver_name="none")

    with tempfile.TemporaryDirectory(prefix="proofofwork-") as td:
        smt2_path = write_refutation_smt2(board, Path(td) / "refutation.smt2")
        script = smt2_path.read_text()
        try:
            rr = run_solver(spec, smt2_path, timeout_s=timeout_s)
        except subprocess.TimeoutExpired:
            logger.warning("Solver %s timed out after %ss", spec.name, timeout_s)
            return ScriptCheckResult(proven=False, result=SolverResult.UNKNOWN,
                                     solver_name=spec.name, script=script)
        except OSError:
            logger.warning("Could not run solver %s", spec.name, exc_info=True)
            return ScriptCheckResult(proven=False, result=SolverResult.UNKNOWN,
                                     solver_name=spec.name, script=script)

    return ScriptCheckResult(
        proven=rr.result == SolverResult.UNSAT,
        result=rr.result,
        solver_name=spec.name,
        solver_time_ms=rr.time_ms,
        script=script,
        raw_stdout=rr.stdout,
        raw_stderr=rr.stderr,
    )
