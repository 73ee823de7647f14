"""Piece value object and the twelve named pieces."""

from __future__ import annotations

from dataclasses import dataclass

from chesscore.core.enums import PieceColor, PieceKind

# FEN character letters, uppercase for white
_FEN_LETTERS: dict[PieceKind, str] = {
    PieceKind.PAWN: "P",
    PieceKind.KNIGHT: "N",
    PieceKind.BISHOP: "B",
    PieceKind.ROOK: "R",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}

_UNICODE: dict[tuple[PieceColor, PieceKind], str] = {
    (PieceColor.WHITE, PieceKind.PAWN): "♙",
    (PieceColor.WHITE, PieceKind.KNIGHT): "♘",
    (PieceColor.WHITE, PieceKind.BISHOP): "♗",
    (PieceColor.WHITE, PieceKind.ROOK): "♖",
    (PieceColor.WHITE, PieceKind.QUEEN): "♕",
    (PieceColor.WHITE, PieceKind.KING): "♔",
    (PieceColor.BLACK, PieceKind.PAWN): "♟",
    (PieceColor.BLACK, PieceKind.KNIGHT): "♞",
    (PieceColor.BLACK, PieceKind.BISHOP): "♝",
    (PieceColor.BLACK, PieceKind.ROOK): "♜",
    (PieceColor.BLACK, PieceKind.QUEEN): "♛",
    (PieceColor.BLACK, PieceKind.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    kind: PieceKind
    color: PieceColor

    @property
    def opposite(self) -> Piece:
        """Same kind, other color."""
        return Piece(self.kind, self.color.opposite)

    # ── Predicates ───────────────────────────────────────────────────────

    @property
    def is_white(self) -> bool:
        return self.color == PieceColor.WHITE

    @property
    def is_black(self) -> bool:
        return self.color == PieceColor.BLACK

    @property
    def is_pawn(self) -> bool:
        return self.kind == PieceKind.PAWN

    @property
    def is_knight(self) -> bool:
        return self.kind == PieceKind.KNIGHT

    @property
    def is_bishop(self) -> bool:
        return self.kind == PieceKind.BISHOP

    @property
    def is_rook(self) -> bool:
        return self.kind == PieceKind.ROOK

    @property
    def is_queen(self) -> bool:
        return self.kind == PieceKind.QUEEN

    @property
    def is_king(self) -> bool:
        return self.kind == PieceKind.KING

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        letter = _FEN_LETTERS[self.kind]
        return letter if self.is_white else letter.lower()

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.kind)]


WHITE_PAWN = Piece(PieceKind.PAWN, PieceColor.WHITE)
WHITE_KNIGHT = Piece(PieceKind.KNIGHT, PieceColor.WHITE)
WHITE_BISHOP = Piece(PieceKind.BISHOP, PieceColor.WHITE)
WHITE_ROOK = Piece(PieceKind.ROOK, PieceColor.WHITE)
WHITE_QUEEN = Piece(PieceKind.QUEEN, PieceColor.WHITE)
WHITE_KING = Piece(PieceKind.KING, PieceColor.WHITE)

BLACK_PAWN = Piece(PieceKind.PAWN, PieceColor.BLACK)
BLACK_KNIGHT = Piece(PieceKind.KNIGHT, PieceColor.BLACK)
BLACK_BISHOP = Piece(PieceKind.BISHOP, PieceColor.BLACK)
BLACK_ROOK = Piece(PieceKind.ROOK, PieceColor.BLACK)
BLACK_QUEEN = Piece(PieceKind.QUEEN, PieceColor.BLACK)
BLACK_KING = Piece(PieceKind.KING, PieceColor.BLACK)
