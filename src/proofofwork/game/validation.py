"""
Validation for board state and piece placement.

Provides rules for validating piece placement, wire connections, and
overall board correctness before proof verification is attempted. Every
rule reports its findings as values; nothing here raises for bad input.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set

from .board import BoardState
from .level import BuildProofTree, ConnectNodes, Level, ProveFormula
from .pieces import LogicPiece, PieceKind, Position, Wire

DISCONNECTED_GATE_RADIUS = 2
MIN_VERIFIABLE_PIECES = 3

_GATE_INPUT_KINDS = frozenset({
    PieceKind.ASSUMPTION,
    PieceKind.AND_INTRO,
    PieceKind.OR_INTRO,
})


class ValidationError:
    """Base for structural problems found on a board or level."""


@dataclass(frozen=True)
class OutOfBounds(ValidationError):
    """Piece is placed outside board boundaries."""
    x: int
    y: int
    max_x: int
    max_y: int

    def __str__(self) -> str:
        return f"Position ({self.x}, {self.y}) is outside the board (max {self.max_x}, {self.max_y})"


@dataclass(frozen=True)
class OverlappingPieces(ValidationError):
    position: Position

    def __str__(self) -> str:
        return f"More than one piece at {self.position}"


@dataclass(frozen=True)
class InvalidWire(ValidationError):
    from_pos: Position
    to_pos: Position
    reason: str

    def __str__(self) -> str:
        return f"Invalid wire {self.from_pos} -> {self.to_pos}: {self.reason}"


@dataclass(frozen=True)
class NoGoals(ValidationError):
    def __str__(self) -> str:
        return "Board has no goal"


@dataclass(frozen=True)
class NoAssumptions(ValidationError):
    def __str__(self) -> str:
        return "Board has no assumptions"


@dataclass(frozen=True)
class InvalidFormula(ValidationError):
    formula: str
    reason: str

    def __str__(self) -> str:
        return f"Invalid formula {self.formula!r}: {self.reason}"


@dataclass
class ValidationResult:
    """Result of board or level validation.

    Warnings are advisory and never affect `is_valid`.
    """
    is_valid: bool
    errors: List[ValidationError] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, errors: List[ValidationError]) -> "ValidationResult":
        return cls(is_valid=False, errors=list(errors))

    @classmethod
    def from_findings(cls, errors: List[ValidationError], warnings: List[str]) -> "ValidationResult":
        return cls(is_valid=not errors, errors=list(errors), warnings=list(warnings))

    def with_warning(self, warning: str) -> "ValidationResult":
        self.warnings.append(warning)
        return self


def _out_of_bounds(board: BoardState, x: int, y: int) -> OutOfBounds:
    return OutOfBounds(x=x, y=y, max_x=board.width - 1, max_y=board.height - 1)


def _check_formula(formula: str, empty_reason: str) -> Optional[InvalidFormula]:
    if not formula:
        return InvalidFormula(formula=formula, reason=empty_reason)
    first = formula[0]
    if not (first.isalnum() or first == "("):
        return InvalidFormula(
            formula=formula,
            reason="Formula must start with identifier or parenthesis",
        )
    return None


def validate_piece_placement(board: BoardState, piece: LogicPiece) -> Optional[ValidationError]:
    """Check whether `piece` may be placed on `board`.

    Rules are checked in order (bounds, occupancy, wire rules, formula
    syntax) and only the first violation is reported.

    Returns:
        None if the placement is allowed, otherwise the violated rule
    """
    x, y = piece.position

    if not board.in_bounds(x, y):
        return _out_of_bounds(board, x, y)

    if board.is_occupied(x, y):
        return OverlappingPieces(position=(x, y))

    if isinstance(piece, Wire):
        if piece.from_pos == piece.to_pos:
            return InvalidWire(piece.from_pos, piece.to_pos,
                               "Wire cannot connect a position to itself")
        if not board.in_bounds(*piece.from_pos):
            return InvalidWire(piece.from_pos, piece.to_pos,
                               "Wire start position out of bounds")
        if not board.in_bounds(*piece.to_pos):
            return InvalidWire(piece.from_pos, piece.to_pos,
                               "Wire end position out of bounds")

    if piece.kind in (PieceKind.ASSUMPTION, PieceKind.GOAL):
        return _check_formula(piece.formula, "Formula cannot be empty")

    return None


def validate_board(board: BoardState) -> ValidationResult:
    """Validate every piece on the board and the board as a whole.

    Every out-of-bounds piece and every duplicate position beyond the first
    is reported. Gates with no assumption/AND/OR piece in their box produce
    a warning only. The box includes the gate's own cell, so AND and OR
    gates always count as their own input.
    """
    errors: List[ValidationError] = []
    warnings: List[str] = []

    for piece in board.pieces:
        x, y = piece.position
        if not board.in_bounds(x, y):
            errors.append(_out_of_bounds(board, x, y))

    seen: Set[Position] = set()
    for piece in board.pieces:
        pos = piece.position
        if pos in seen:
            errors.append(OverlappingPieces(position=pos))
        else:
            seen.add(pos)

    if not board.assumptions():
        errors.append(NoAssumptions())
    if not board.goals():
        errors.append(NoGoals())

    for gate in board.gates():
        gx, gy = gate.position
        nearby = board.pieces_near(gx, gy, DISCONNECTED_GATE_RADIUS)
        if not any(p.kind in _GATE_INPUT_KINDS for p in nearby):
            warnings.append(f"Gate at ({gx}, {gy}) has no nearby input pieces")

    return ValidationResult.from_findings(errors, warnings)


def validate_level(level: Level) -> ValidationResult:
    """Validate a level's starting board and its goal condition."""
    board = level.initial_state
    board_result = validate_board(board)
    errors = list(board_result.errors)
    warnings = list(board_result.warnings)

    goal = level.goal_state
    if isinstance(goal, ConnectNodes):
        if not board.in_bounds(*goal.start):
            warnings.append(f"Goal start node {goal.start} is outside board bounds")
        if not board.in_bounds(*goal.end):
            warnings.append(f"Goal end node {goal.end} is outside board bounds")
    elif isinstance(goal, ProveFormula):
        if not goal.formula:
            errors.append(InvalidFormula(formula=goal.formula,
                                         reason="Goal formula cannot be empty"))
    elif isinstance(goal, BuildProofTree):
        if goal.depth == 0:
            warnings.append("Proof tree depth of 0 is trivially satisfied")
    else:
        raise TypeError(f"Unknown goal condition: {goal!r}")

    return ValidationResult.from_findings(errors, warnings)


def is_ready_for_verification(board: BoardState) -> bool:
    """True if the board is structurally valid and has at least an
    assumption, a gate and a goal worth of pieces."""
    return validate_board(board).is_valid and board.piece_count() >= MIN_VERIFIABLE_PIECES
