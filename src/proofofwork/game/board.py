"""
Board management for the logic puzzle.

Provides operations for creating and manipulating the puzzle board,
including piece placement, removal, and spatial queries.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .pieces import LogicPiece, PieceKind, Position


@dataclass
class BoardState:
    """A width x height grid and the pieces placed on it, in placement order.

    Mutating operations are not synchronized; one writer at a time.
    """
    width: int
    height: int
    pieces: List[LogicPiece] = field(default_factory=list)

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.width}x{self.height}")

    @classmethod
    def with_pieces(cls, width: int, height: int, pieces: Iterable[LogicPiece]) -> "BoardState":
        """Create a board with pre-placed pieces (not validated)."""
        return cls(width, height, list(pieces))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_occupied(self, x: int, y: int) -> bool:
        return any(p.position == (x, y) for p in self.pieces)

    def piece_at(self, x: int, y: int) -> Optional[LogicPiece]:
        for p in self.pieces:
            if p.position == (x, y):
                return p
        return None

    def _index_at(self, x: int, y: int) -> Optional[int]:
        for i, p in enumerate(self.pieces):
            if p.position == (x, y):
                return i
        return None

    def place_piece(self, piece: LogicPiece) -> bool:
        """Add a piece if its position is in bounds and unoccupied.

        Returns:
            True if the piece was placed; the board is unchanged otherwise
        """
        x, y = piece.position
        if not self.in_bounds(x, y):
            return False
        if self.is_occupied(x, y):
            return False
        self.pieces.append(piece)
        return True

    def remove_piece(self, x: int, y: int) -> Optional[LogicPiece]:
        """Remove and return the first piece at (x, y), if any."""
        index = self._index_at(x, y)
        if index is None:
            return None
        return self.pieces.pop(index)

    def move_piece(self, from_pos: Position, to_pos: Position) -> bool:
        """Move the piece at `from_pos` to `to_pos`.

        The moved piece keeps its kind, payload and place in the piece order.
        """
        if not self.in_bounds(*to_pos):
            return False
        if self.is_occupied(*to_pos):
            return False
        index = self._index_at(*from_pos)
        if index is None:
            return False
        self.pieces[index] = self.pieces[index].with_position(to_pos)
        return True

    def pieces_near(self, x: int, y: int, radius: int) -> List[LogicPiece]:
        """Pieces within a Chebyshev box of `radius` around (x, y), including (x, y)."""
        return [
            p for p in self.pieces
            if abs(p.position[0] - x) <= radius and abs(p.position[1] - y) <= radius
        ]

    def assumptions(self) -> List[LogicPiece]:
        return [p for p in self.pieces if p.kind == PieceKind.ASSUMPTION]

    def goals(self) -> List[LogicPiece]:
        return [p for p in self.pieces if p.kind == PieceKind.GOAL]

    def gates(self) -> List[LogicPiece]:
        """AND, OR, IMPLIES and NOT gates; quantifiers are not included."""
        return [p for p in self.pieces if p.is_gate]

    def wires(self) -> List[LogicPiece]:
        return [p for p in self.pieces if p.kind == PieceKind.WIRE]

    def clear(self) -> None:
        self.pieces.clear()

    def piece_count(self) -> int:
        return len(self.pieces)
