"""
Logic pieces that can be placed on the puzzle board.

Each piece kind is its own frozen dataclass. Terminals (Assumption, Goal)
carry a formula, quantifier gates carry a bound variable, connective gates
carry nothing but their position. Operand binding for gates comes from
spatial adjacency and is resolved by the verification engine, so the
per-piece SMT fragments for gates are placeholders.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar, Tuple

Position = Tuple[int, int]


class PieceKind(Enum):
    ASSUMPTION = "Assumption"
    GOAL = "Goal"
    AND_INTRO = "AndIntro"
    OR_INTRO = "OrIntro"
    IMPLIES_INTRO = "ImpliesIntro"
    NOT_INTRO = "NotIntro"
    FORALL_INTRO = "ForallIntro"
    EXISTS_INTRO = "ExistsIntro"
    WIRE = "Wire"


GATE_KINDS = frozenset({
    PieceKind.AND_INTRO,
    PieceKind.OR_INTRO,
    PieceKind.IMPLIES_INTRO,
    PieceKind.NOT_INTRO,
})


class LogicPiece(ABC):
    """Base for all piece kinds.

    Every piece has exactly one canonical ``position`` used for occupancy
    and adjacency queries. Pieces are immutable; moving one produces a copy
    via :meth:`with_position` that keeps every other attribute.
    """

    kind: ClassVar[PieceKind]

    @property
    def is_gate(self) -> bool:
        return self.kind in GATE_KINDS

    def with_position(self, new_pos: Position) -> "LogicPiece":
        return replace(self, position=new_pos)

    @abstractmethod
    def to_smt(self) -> str:
        """Return the SMT-LIB2 fragment for this piece on its own."""

    @abstractmethod
    def label(self) -> str:
        """Short text shown on the piece."""


@dataclass(frozen=True)
class Assumption(LogicPiece):
    formula: str
    position: Position

    kind: ClassVar[PieceKind] = PieceKind.ASSUMPTION

    def to_smt(self) -> str:
        return f"(assert {self.formula})"

    def label(self) -> str:
        return self.formula


@dataclass(frozen=True)
class Goal(LogicPiece):
    formula: str
    position: Position

    kind: ClassVar[PieceKind] = PieceKind.GOAL

    def to_smt(self) -> str:
        # Local refutation fragment; the whole-board generators decide
        # separately whether the goal is negated.
        return f"(assert (not {self.formula}))"

    def label(self) -> str:
        return self.formula


@dataclass(frozen=True)
class AndIntro(LogicPiece):
    position: Position

    kind: ClassVar[PieceKind] = PieceKind.AND_INTRO

    def to_smt(self) -> str:
        return "(and _ _)"

    def label(self) -> str:
        return "AND"


@dataclass(frozen=True)
class OrIntro(LogicPiece):
    position: Position

    kind: ClassVar[PieceKind] = PieceKind.OR_INTRO

    def to_smt(self) -> str:
        return "(or _ _)"

    def label(self) -> str:
        return "OR"


@dataclass(frozen=True)
class ImpliesIntro(LogicPiece):
    position: Position

    kind: ClassVar[PieceKind] = PieceKind.IMPLIES_INTRO

    def to_smt(self) -> str:
        return "(=> _ _)"

    def label(self) -> str:
        return "=>"


@dataclass(frozen=True)
class NotIntro(LogicPiece):
    position: Position

    kind: ClassVar[PieceKind] = PieceKind.NOT_INTRO

    def to_smt(self) -> str:
        return "(not _)"

    def label(self) -> str:
        return "NOT"


@dataclass(frozen=True)
class ForallIntro(LogicPiece):
    position: Position
    variable: str

    kind: ClassVar[PieceKind] = PieceKind.FORALL_INTRO

    def to_smt(self) -> str:
        return f"(forall (({self.variable} Int)) _)"

    def label(self) -> str:
        return f"∀{self.variable}"


@dataclass(frozen=True)
class ExistsIntro(LogicPiece):
    position: Position
    variable: str

    kind: ClassVar[PieceKind] = PieceKind.EXISTS_INTRO

    def to_smt(self) -> str:
        return f"(exists (({self.variable} Int)) _)"

    def label(self) -> str:
        return f"∃{self.variable}"


@dataclass(frozen=True)
class Wire(LogicPiece):
    """Connector between two cells. Not a logical operator."""

    from_pos: Position
    to_pos: Position

    kind: ClassVar[PieceKind] = PieceKind.WIRE

    @property
    def position(self) -> Position:
        return self.from_pos

    def with_position(self, new_pos: Position) -> "Wire":
        return replace(self, from_pos=new_pos)

    def to_smt(self) -> str:
        return ""

    def label(self) -> str:
        return "-"


PIECE_TYPES = {
    cls.kind: cls
    for cls in (Assumption, Goal, AndIntro, OrIntro, ImpliesIntro,
                NotIntro, ForallIntro, ExistsIntro, Wire)
}
