"""Move value objects, one class per kind of chess move.

Every non-castling move carries whatever it needs to be undone (the captured
piece, the promoted-to piece), so a board can reverse it without keeping a
history stack. Castles need no payload: their squares are fixed by color and
side.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from chesscore.core.enums import PieceColor
from chesscore.core.piece import Piece
from chesscore.core.types import (
    A1,
    A8,
    C1,
    C8,
    D1,
    D8,
    E1,
    E8,
    F1,
    F8,
    G1,
    G8,
    H1,
    H8,
    Square,
)


@dataclass(frozen=True, slots=True)
class Move(ABC):
    """Common base of all move kinds."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable move kind, used in error messages."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class QuietMove(Move):
    """A piece moving to an empty square."""

    from_sq: Square
    to_sq: Square

    @property
    def description(self) -> str:
        return "move"

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}"


@dataclass(frozen=True, slots=True)
class Capture(Move):
    """A piece capturing *capturing*, which stands on *to_sq*."""

    capturing: Piece
    from_sq: Square
    to_sq: Square

    @property
    def description(self) -> str:
        return "capture"

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}"


@dataclass(frozen=True, slots=True)
class EnPassantCapture(Move):
    """A pawn capturing an adjacent pawn en passant.

    The captured pawn stands on :attr:`captured_sq` (the file of *to_sq* and
    the rank of *from_sq*), not on *to_sq*.
    """

    capturing: Piece
    from_sq: Square
    to_sq: Square

    @property
    def captured_sq(self) -> Square:
        return Square(self.to_sq.file, self.from_sq.rank)

    @property
    def description(self) -> str:
        return "en passant capture"

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}"


@dataclass(frozen=True, slots=True)
class PromotionMove(Move):
    """A pawn reaching the last rank without capturing."""

    promoting: Piece
    from_sq: Square
    to_sq: Square

    @property
    def description(self) -> str:
        return "promotion"

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}{str(self.promoting.kind).lower()}"


@dataclass(frozen=True, slots=True)
class PromotionCapture(Move):
    """A pawn reaching the last rank by capturing *capturing*."""

    promoting: Piece
    capturing: Piece
    from_sq: Square
    to_sq: Square

    @property
    def description(self) -> str:
        return "promotion capture"

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}{str(self.promoting.kind).lower()}"


class CastleSide(Enum):
    KINGSIDE = "kingside"
    QUEENSIDE = "queenside"


# (color, side) -> (king_from, rook_from, king_to, rook_to)
_CASTLE_SQUARES: dict[tuple[PieceColor, CastleSide], tuple[Square, Square, Square, Square]] = {
    (PieceColor.WHITE, CastleSide.KINGSIDE): (E1, H1, G1, F1),
    (PieceColor.WHITE, CastleSide.QUEENSIDE): (E1, A1, C1, D1),
    (PieceColor.BLACK, CastleSide.KINGSIDE): (E8, H8, G8, F8),
    (PieceColor.BLACK, CastleSide.QUEENSIDE): (E8, A8, C8, D8),
}


@dataclass(frozen=True, slots=True)
class Castle(Move):
    """King and rook relocation on their canonical squares.

    Use the four module constants rather than building these directly.
    """

    color: PieceColor
    side: CastleSide

    @property
    def king_from(self) -> Square:
        return _CASTLE_SQUARES[(self.color, self.side)][0]

    @property
    def rook_from(self) -> Square:
        return _CASTLE_SQUARES[(self.color, self.side)][1]

    @property
    def king_to(self) -> Square:
        return _CASTLE_SQUARES[(self.color, self.side)][2]

    @property
    def rook_to(self) -> Square:
        return _CASTLE_SQUARES[(self.color, self.side)][3]

    @property
    def description(self) -> str:
        return f"{self.color.name.lower()} {self.side.value} castle"

    def __str__(self) -> str:
        return "O-O" if self.side == CastleSide.KINGSIDE else "O-O-O"


KINGSIDE_CASTLE_WHITE = Castle(PieceColor.WHITE, CastleSide.KINGSIDE)
QUEENSIDE_CASTLE_WHITE = Castle(PieceColor.WHITE, CastleSide.QUEENSIDE)
KINGSIDE_CASTLE_BLACK = Castle(PieceColor.BLACK, CastleSide.KINGSIDE)
QUEENSIDE_CASTLE_BLACK = Castle(PieceColor.BLACK, CastleSide.QUEENSIDE)
