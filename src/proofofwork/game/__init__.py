"""
Board, piece and level model for the logic puzzle, plus structural validation.
"""

from .pieces import (
    Position,
    PieceKind,
    GATE_KINDS,
    PIECE_TYPES,
    LogicPiece,
    Assumption,
    Goal,
    AndIntro,
    OrIntro,
    ImpliesIntro,
    NotIntro,
    ForallIntro,
    ExistsIntro,
    Wire,
)
from .board import BoardState
from .level import Level, GoalCondition, ConnectNodes, ProveFormula, BuildProofTree
from .validation import (
    ValidationError,
    OutOfBounds,
    OverlappingPieces,
    InvalidWire,
    NoGoals,
    NoAssumptions,
    InvalidFormula,
    ValidationResult,
    validate_piece_placement,
    validate_board,
    validate_level,
    is_ready_for_verification,
)

__all__ = [
    "Position",
    "PieceKind",
    "GATE_KINDS",
    "PIECE_TYPES",
    "LogicPiece",
    "Assumption",
    "Goal",
    "AndIntro",
    "OrIntro",
    "ImpliesIntro",
    "NotIntro",
    "ForallIntro",
    "ExistsIntro",
    "Wire",
    "BoardState",
    "Level",
    "GoalCondition",
    "ConnectNodes",
    "ProveFormula",
    "BuildProofTree",
    "ValidationError",
    "OutOfBounds",
    "OverlappingPieces",
    "InvalidWire",
    "NoGoals",
    "NoAssumptions",
    "InvalidFormula",
    "ValidationResult",
    "validate_piece_placement",
    "validate_board",
    "validate_level",
    "is_ready_for_verification",
]
