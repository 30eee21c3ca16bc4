"""
Proof-placement verification for the Proof of Work logic puzzle.

Players place logic pieces on a grid; this package decides whether the
arrangement encodes a valid proof of the goal and renders it as an
SMT-LIBv2 script.
"""

__version__ = "0.1.0"

from .game import (
    BoardState,
    Level,
    LogicPiece,
    PieceKind,
    Assumption,
    Goal,
    AndIntro,
    OrIntro,
    ImpliesIntro,
    NotIntro,
    ForallIntro,
    ExistsIntro,
    Wire,
    ConnectNodes,
    ProveFormula,
    BuildProofTree,
    ValidationResult,
    validate_piece_placement,
    validate_board,
    validate_level,
    is_ready_for_verification,
)
from .solver import SolverBackend, SolverResult, VerificationResult, Z3Solver
from .verification import (
    is_adjacent,
    board_to_smt,
    board_to_refutation_smt,
    verify_level_solution,
    verify_connectivity,
    verify_with_external_solver,
    ExportedProof,
)
from .levels import LevelPack, load_packs, create_builtin_tutorial_pack

__all__ = [
    "BoardState",
    "Level",
    "LogicPiece",
    "PieceKind",
    "Assumption",
    "Goal",
    "AndIntro",
    "OrIntro",
    "ImpliesIntro",
    "NotIntro",
    "ForallIntro",
    "ExistsIntro",
    "Wire",
    "ConnectNodes",
    "ProveFormula",
    "BuildProofTree",
    "ValidationResult",
    "validate_piece_placement",
    "validate_board",
    "validate_level",
    "is_ready_for_verification",
    "SolverBackend",
    "SolverResult",
    "VerificationResult",
    "Z3Solver",
    "is_adjacent",
    "board_to_smt",
    "board_to_refutation_smt",
    "verify_level_solution",
    "verify_connectivity",
    "verify_with_external_solver",
    "ExportedProof",
    "LevelPack",
    "load_packs",
    "create_builtin_tutorial_pack",
]
