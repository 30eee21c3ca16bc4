"""Exported proof records handed to the submission layer."""

from __future__ import annotations

from typing import List, Optional
import hashlib

from pydantic import BaseModel, ConfigDict, Field

from ..game.board import BoardState
from ..game.level import Level
from .proof_smt2 import board_to_smt


class ExportedProof(BaseModel):
    """A solved level, as sent to the leaderboard service.

    `proof_isabelle` and `solution_steps` are reserved and currently
    always empty.
    """
    model_config = ConfigDict(frozen=True)

    level_id: int
    player_id: str
    proof_smt2: str
    proof_isabelle: Optional[str] = None
    solution_steps: List[str] = Field(default_factory=list)
    time_taken_secs: int

    @classmethod
    def from_level(
        cls,
        level: Level,
        solution_time: int,
        board: Optional[BoardState] = None,
        player_id: str = "local",
    ) -> "ExportedProof":
        """Build the record for a solved level.

        Args:
            level: The level that was solved
            solution_time: Elapsed solve time in whole seconds
            board: The solved board; defaults to the level's initial board
            player_id: Identifier of the solving player
        """
        return cls(
            level_id=level.id,
            player_id=player_id,
            proof_smt2=board_to_smt(board if board is not None else level.initial_state),
            time_taken_secs=solution_time,
        )

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: str | bytes) -> "ExportedProof":
        return cls.model_validate_json(data)


def sign_proof(proof: ExportedProof, api_key: str) -> str:
    """Hex SHA-256 over the proof's JSON followed by the API key."""
    hasher = hashlib.sha256()
    hasher.update(proof.to_json().encode("utf-8"))
    hasher.update(api_key.encode("utf-8"))
    return hasher.hexdigest()
