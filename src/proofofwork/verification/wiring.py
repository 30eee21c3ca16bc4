"""Spatial adjacency and the AND-gate wiring it implies.

A gate is wired to a piece when the two sit within a 2-cell Chebyshev box
of each other. The supported puzzle shape is an AND gate fed by the
assumptions ``P`` and ``Q`` and feeding a goal; other gate kinds and
formula names are not interpreted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..game.pieces import LogicPiece, PieceKind, Position

ADJACENCY_RADIUS = 2
AND_INPUTS: Tuple[str, str] = ("P", "Q")


def is_adjacent(a: Position, b: Position) -> bool:
    """Symmetric, irreflexive: within the box and not the same cell."""
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return dx <= ADJACENCY_RADIUS and dy <= ADJACENCY_RADIUS and (dx + dy) > 0


@dataclass(frozen=True)
class AndGateWiring:
    """An AND gate whose neighbourhood contains both inputs and a goal."""

    gate: Position
    inputs: Tuple[str, str]
    goals: Tuple[str, ...]


def find_and_gate_candidates(pieces: Sequence[LogicPiece]) -> List[AndGateWiring]:
    """Return, in piece order, every AND gate adjacent to P, Q and some goal.

    Each candidate lists the formulas of all goals adjacent to the gate in
    piece order. The input sequence is not modified.
    """
    assumptions = [(p.formula, p.position) for p in pieces if p.kind == PieceKind.ASSUMPTION]
    goals = [(p.formula, p.position) for p in pieces if p.kind == PieceKind.GOAL]
    and_gates = [p.position for p in pieces if p.kind == PieceKind.AND_INTRO]

    candidates: List[AndGateWiring] = []
    for gate in and_gates:
        near = {formula for formula, pos in assumptions if is_adjacent(pos, gate)}
        if not all(name in near for name in AND_INPUTS):
            continue
        goal_formulas = tuple(formula for formula, pos in goals if is_adjacent(gate, pos))
        if not goal_formulas:
            continue
        candidates.append(AndGateWiring(gate=gate, inputs=AND_INPUTS, goals=goal_formulas))
    return candidates
