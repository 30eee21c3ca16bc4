"""SMT-LIBv2 script generation for boards.

Two scripts are produced:

- ``board_to_smt``: the descriptive proof artifact that is exported with a
  solved level. Every terminal formula is declared and the assumptions are
  asserted; the goal is declared only.
- ``board_to_refutation_smt``: the query a solver actually checks. It adds
  the implication contributed by each wired AND gate and the negation of
  every wired goal, so the script is UNSAT iff the board proves one of them.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..game.board import BoardState
from ..game.pieces import PieceKind
from .wiring import find_and_gate_candidates

HEADER = "; Proof of Work - Generated Proof"
REFUTATION_HEADER = "; Proof of Work - Refutation Query"
LOGIC = "QF_UF"


def _declarations(board: BoardState) -> List[str]:
    lines: List[str] = []
    declared: List[str] = []
    for piece in board.pieces:
        if piece.kind not in (PieceKind.ASSUMPTION, PieceKind.GOAL):
            continue
        if piece.formula in declared:
            continue
        declared.append(piece.formula)
        lines.append(f"(declare-const {piece.formula} Bool)")
    return lines


def _assumption_asserts(board: BoardState) -> List[str]:
    return [f"(assert {p.formula})" for p in board.assumptions()]


def _refuted_goals(board: BoardState, wired: List[str]) -> List[str]:
    # Each wired goal is negated on its own, so certifying any one of them
    # makes the script UNSAT. Without wiring only the first goal is negated.
    if wired:
        return wired
    goals = board.goals()
    return [goals[0].formula] if goals else []


def board_to_smt(board: BoardState) -> str:
    lines: List[str] = [HEADER, f"(set-logic {LOGIC})"]
    lines.extend(_declarations(board))
    lines.extend(_assumption_asserts(board))
    lines.append("(check-sat)")
    return "\n".join(lines) + "\n"


def board_to_refutation_smt(board: BoardState) -> str:
    lines: List[str] = [REFUTATION_HEADER, f"(set-logic {LOGIC})"]
    lines.extend(_declarations(board))
    lines.extend(_assumption_asserts(board))

    wired: List[str] = []
    for wiring in find_and_gate_candidates(board.pieces):
        lhs, rhs = wiring.inputs
        lines.append(f"; AND gate at {wiring.gate}")
        for goal in wiring.goals:
            lines.append(f"(assert (=> (and {lhs} {rhs}) {goal}))")
            if goal not in wired:
                wired.append(goal)

    for goal in _refuted_goals(board, wired):
        lines.append(f"(assert (not {goal}))")

    lines.append("(check-sat)")
    return "\n".join(lines) + "\n"


def write_board_smt2(board: BoardState, out_file: str | Path) -> Path:
    out_path = Path(out_file)
    out_path.write_text(board_to_smt(board))
    return out_path


def write_refutation_smt2(board: BoardState, out_file: str | Path) -> Path:
    out_path = Path(out_file)
    out_path.write_text(board_to_refutation_smt(board))
    return out_path
