"""Proof verification for boards.

Adjacency wiring, SMT-LIBv2 script generation, the decision procedure and
proof export. External solver executables are run as subprocesses; the
in-process check uses the solver backends from ``proofofwork.solver``.
"""

from .wiring import ADJACENCY_RADIUS, AndGateWiring, is_adjacent, find_and_gate_candidates
from .proof_smt2 import (
    board_to_smt,
    board_to_refutation_smt,
    write_board_smt2,
    write_refutation_smt2,
)
from .solver_runner import (
    SolverSpec,
    SolverRunResult,
    resolve_solver,
    run_solver,
    is_solver_available,
    pick_solver,
)
from .engine import (
    ScriptCheckResult,
    verify_level_solution,
    verify_connectivity,
    verify_with_external_solver,
)
from .export import ExportedProof, sign_proof

__all__ = [
    "ADJACENCY_RADIUS",
    "AndGateWiring",
    "is_adjacent",
    "find_and_gate_candidates",
    "board_to_smt",
    "board_to_refutation_smt",
    "write_board_smt2",
    "write_refutation_smt2",
    "SolverSpec",
    "SolverRunResult",
    "resolve_solver",
    "run_solver",
    "is_solver_available",
    "pick_solver",
    "ScriptCheckResult",
    "verify_level_solution",
    "verify_connectivity",
    "verify_with_external_solver",
    "ExportedProof",
    "sign_proof",
]
