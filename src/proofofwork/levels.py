"""
Level packs: decoding, encoding and the built-in tutorial pack.

Packs are stored as JSON. Piece and goal variants use an externally tagged
layout, e.g. ``{"Assumption": {"formula": "P", "position": [2, 5]}}`` and
``{"ProveFormula": {"formula": "R"}}``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List
import json
import logging

from .game.board import BoardState
from .game.level import BuildProofTree, ConnectNodes, GoalCondition, Level, ProveFormula
from .game.pieces import (
    PIECE_TYPES,
    Assumption,
    Goal,
    LogicPiece,
    PieceKind,
    Position,
)

logger = logging.getLogger(__name__)


class LevelPackError(Exception):
    """Base error for level pack handling."""


class LevelPackIOError(LevelPackError):
    pass


class LevelPackDecodeError(LevelPackError):
    pass


@dataclass
class LevelPack:
    """A collection of levels bundled together."""
    id: str = "untitled"
    name: str = "Untitled Pack"
    author: str = "Unknown"
    description: str = "A new level pack"
    version: str = "1.0.0"
    difficulty: int = 1
    tags: List[str] = field(default_factory=list)
    levels: List[Level] = field(default_factory=list)

    def add_level(self, level: Level) -> None:
        self.levels.append(level)

    def level_count(self) -> int:
        return len(self.levels)

    def save(self, path: str | Path) -> None:
        try:
            Path(path).write_text(json.dumps(pack_to_dict(self), indent=2, ensure_ascii=False),
                                  encoding="utf-8")
        except OSError as e:
            raise LevelPackIOError(f"Cannot write {path}: {e}") from e

    @classmethod
    def load(cls, path: str | Path) -> "LevelPack":
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise LevelPackIOError(f"Cannot read {path}: {e}") from e
        try:
            return pack_from_dict(json.loads(text))
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise LevelPackDecodeError(f"Malformed level pack {path}: {e}") from e


def _pos(value: Any) -> Position:
    x, y = value
    return (int(x), int(y))


def piece_to_dict(piece: LogicPiece) -> Dict[str, Any]:
    kind = piece.kind
    if kind in (PieceKind.ASSUMPTION, PieceKind.GOAL):
        body = {"formula": piece.formula, "position": list(piece.position)}
    elif kind in (PieceKind.FORALL_INTRO, PieceKind.EXISTS_INTRO):
        body = {"position": list(piece.position), "variable": piece.variable}
    elif kind == PieceKind.WIRE:
        body = {"from": list(piece.from_pos), "to": list(piece.to_pos)}
    else:
        body = {"position": list(piece.position)}
    return {kind.value: body}


def piece_from_dict(data: Dict[str, Any]) -> LogicPiece:
    if len(data) != 1:
        raise ValueError(f"Expected a single-key piece object, got {sorted(data)}")
    (tag, body), = data.items()
    try:
        kind = PieceKind(tag)
    except ValueError:
        raise TypeError(f"Unknown piece kind: {tag!r}") from None
    cls = PIECE_TYPES[kind]

    if kind in (PieceKind.ASSUMPTION, PieceKind.GOAL):
        return cls(formula=str(body["formula"]), position=_pos(body["position"]))
    if kind in (PieceKind.FORALL_INTRO, PieceKind.EXISTS_INTRO):
        return cls(position=_pos(body["position"]), variable=str(body["variable"]))
    if kind == PieceKind.WIRE:
        return cls(from_pos=_pos(body["from"]), to_pos=_pos(body["to"]))
    return cls(position=_pos(body["position"]))


def goal_to_dict(goal: GoalCondition) -> Dict[str, Any]:
    if isinstance(goal, ConnectNodes):
        return {"ConnectNodes": {"start": list(goal.start), "end": list(goal.end)}}
    if isinstance(goal, ProveFormula):
        return {"ProveFormula": {"formula": goal.formula}}
    if isinstance(goal, BuildProofTree):
        return {"BuildProofTree": {"depth": goal.depth}}
    raise TypeError(f"Unknown goal condition: {goal!r}")


def goal_from_dict(data: Dict[str, Any]) -> GoalCondition:
    (tag, body), = data.items()
    if tag == "ConnectNodes":
        return ConnectNodes(start=_pos(body["start"]), end=_pos(body["end"]))
    if tag == "ProveFormula":
        return ProveFormula(formula=str(body["formula"]))
    if tag == "BuildProofTree":
        return BuildProofTree(depth=int(body["depth"]))
    raise TypeError(f"Unknown goal condition: {tag!r}")


def level_to_dict(level: Level) -> Dict[str, Any]:
    board = level.initial_state
    return {
        "id": level.id,
        "name": level.name,
        "description": level.description,
        "theorem": level.theorem,
        "initial_state": {
            "width": board.width,
            "height": board.height,
            "pieces": [piece_to_dict(p) for p in board.pieces],
        },
        "goal_state": goal_to_dict(level.goal_state),
    }


def level_from_dict(data: Dict[str, Any]) -> Level:
    board = data["initial_state"]
    return Level(
        id=int(data["id"]),
        name=data["name"],
        description=data["description"],
        theorem=data["theorem"],
        initial_state=BoardState.with_pieces(
            int(board["width"]),
            int(board["height"]),
            (piece_from_dict(p) for p in board["pieces"]),
        ),
        goal_state=goal_from_dict(data["goal_state"]),
    )


def pack_to_dict(pack: LevelPack) -> Dict[str, Any]:
    return {
        "id": pack.id,
        "name": pack.name,
        "author": pack.author,
        "description": pack.description,
        "version": pack.version,
        "difficulty": pack.difficulty,
        "tags": list(pack.tags),
        "levels": [level_to_dict(lvl) for lvl in pack.levels],
    }


def pack_from_dict(data: Dict[str, Any]) -> LevelPack:
    difficulty = int(data["difficulty"])
    if not 1 <= difficulty <= 5:
        raise ValueError(f"Difficulty must be between 1 and 5, got {difficulty}")
    return LevelPack(
        id=data["id"],
        name=data["name"],
        author=data["author"],
        description=data["description"],
        version=data["version"],
        difficulty=difficulty,
        tags=[str(t) for t in data.get("tags", [])],
        levels=[level_from_dict(lvl) for lvl in data.get("levels", [])],
    )


def create_builtin_tutorial_pack() -> LevelPack:
    """The tutorial pack shipped with the game."""
    first_steps = Level(
        id=1,
        name="First Steps",
        description="Place an AND gate to connect P and Q, then connect to R",
        theorem="(assert (=> (and P Q) R))",
        initial_state=BoardState.with_pieces(10, 10, [
            Assumption(formula="P", position=(2, 5)),
            Assumption(formula="Q", position=(2, 3)),
            Goal(formula="R", position=(8, 4)),
        ]),
        goal_state=ProveFormula(formula="R"),
    )
    return LevelPack(
        id="tutorial",
        name="Tutorial",
        author="Proof of Work",
        description="Learn the basics of building proofs",
        tags=["tutorial", "beginner"],
        levels=[first_steps],
    )


def load_packs(directory: str | Path) -> List[LevelPack]:
    """Tutorial pack followed by every decodable ``*.json`` pack in `directory`.

    Packs that fail to load are logged and skipped. A missing directory
    yields just the tutorial pack.
    """
    packs = [create_builtin_tutorial_pack()]
    root = Path(directory)
    if not root.is_dir():
        logger.debug("Pack directory %s does not exist", root)
        return packs

    for path in sorted(root.glob("*.json")):
        try:
            packs.append(LevelPack.load(path))
        except LevelPackError as e:
            logger.warning("Failed to load pack %s: %s", path, e)
    return packs
