"""
Level definitions and their win conditions.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .board import BoardState
from .pieces import Position


@dataclass(frozen=True)
class ConnectNodes:
    start: Position
    end: Position


@dataclass(frozen=True)
class ProveFormula:
    formula: str


@dataclass(frozen=True)
class BuildProofTree:
    depth: int


GoalCondition = Union[ConnectNodes, ProveFormula, BuildProofTree]


@dataclass
class Level:
    """A puzzle: starting board plus the condition that solves it.

    `theorem` is informational SMT-LIB text and is never parsed.
    """
    id: int
    name: str
    description: str
    theorem: str
    initial_state: BoardState
    goal_state: GoalCondition
