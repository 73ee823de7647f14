"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum

# Algebraic letters; pawns have none.
_KIND_LETTERS: dict[int, str] = {
    1: "",
    2: "N",
    3: "B",
    4: "R",
    5: "Q",
    6: "K",
}


class PieceColor(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> PieceColor:
        return PieceColor(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        """Algebraic letter, e.g. ``N`` for a knight and ``""`` for a pawn."""
        return _KIND_LETTERS[self.value]
