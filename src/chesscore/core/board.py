"""Board - piece placement on an 8x8 board, with move play/undo."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from chesscore.core.enums import PieceColor, PieceKind
from chesscore.core.errors import IllegalMoveError
from chesscore.core.move import (
    Capture,
    Castle,
    EnPassantCapture,
    Move,
    PromotionCapture,
    PromotionMove,
    QuietMove,
)
from chesscore.core.piece import (
    BLACK_BISHOP,
    BLACK_KING,
    BLACK_KNIGHT,
    BLACK_PAWN,
    BLACK_QUEEN,
    BLACK_ROOK,
    WHITE_BISHOP,
    WHITE_KING,
    WHITE_KNIGHT,
    WHITE_PAWN,
    WHITE_QUEEN,
    WHITE_ROOK,
    Piece,
)
from chesscore.core.types import File, Rank, Square, SquareLike, to_square

_LOGGER = logging.getLogger(__name__)

_WHITE_BACK_RANK = (
    WHITE_ROOK,
    WHITE_KNIGHT,
    WHITE_BISHOP,
    WHITE_QUEEN,
    WHITE_KING,
    WHITE_BISHOP,
    WHITE_KNIGHT,
    WHITE_ROOK,
)
_BLACK_BACK_RANK = (
    BLACK_ROOK,
    BLACK_KNIGHT,
    BLACK_BISHOP,
    BLACK_QUEEN,
    BLACK_KING,
    BLACK_BISHOP,
    BLACK_KNIGHT,
    BLACK_ROOK,
)


class Board:
    """Mutable 8x8 occupancy grid, indexed ``[rank][file]``.

    :meth:`play` and :meth:`undo` are the only move-level mutators; the
    ``*_piece`` primitives exist for setting up positions. Moves are trusted
    to be legal. When one does not fit the board, :class:`IllegalMoveError`
    is raised and the board may be left partially updated (for instance a
    castle whose rook is missing has already lifted the king).
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def get_piece(self, square: SquareLike) -> Piece | None:
        file, rank = to_square(square).indices()
        return self._grid[rank][file]

    def set_piece(self, square: SquareLike, piece: Piece) -> None:
        """Place *piece* on *square*, replacing any occupant."""
        file, rank = to_square(square).indices()
        self._grid[rank][file] = piece

    def remove_piece(self, square: SquareLike) -> None:
        file, rank = to_square(square).indices()
        self._grid[rank][file] = None

    def take_piece(self, square: SquareLike) -> Piece | None:
        """Empty *square* and return what stood on it."""
        file, rank = to_square(square).indices()
        piece = self._grid[rank][file]
        self._grid[rank][file] = None
        return piece

    def __getitem__(self, square: SquareLike) -> Piece | None:
        return self.get_piece(square)

    def __setitem__(self, square: SquareLike, piece: Piece | None) -> None:
        if piece is None:
            self.remove_piece(square)
        else:
            self.set_piece(square, piece)

    def is_empty(self, square: SquareLike) -> bool:
        return self.get_piece(square) is None

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, a1 to h8."""
        for r, row in enumerate(self._grid):
            for f, piece in enumerate(row):
                if piece is not None:
                    yield Square(File(f), Rank(r)), piece

    # -- Move application ---------------------------------------------------

    def play(self, move: Move) -> None:
        """Apply *move* to the board."""
        if isinstance(move, (QuietMove, Capture)):
            # The captured piece is simply overwritten on to_sq.
            piece = self._expect(self.take_piece(move.from_sq), move)
            self.set_piece(move.to_sq, piece)
        elif isinstance(move, EnPassantCapture):
            pawn = self._expect(self.take_piece(move.from_sq), move)
            self.set_piece(move.to_sq, pawn)
            self.remove_piece(move.captured_sq)
        elif isinstance(move, (PromotionMove, PromotionCapture)):
            self.remove_piece(move.from_sq)
            self.set_piece(move.to_sq, move.promoting)
        elif isinstance(move, Castle):
            king = self._expect(self.take_piece(move.king_from), move)
            rook = self._expect(self.take_piece(move.rook_from), move)
            self.set_piece(move.king_to, king)
            self.set_piece(move.rook_to, rook)
        else:
            raise TypeError(f"Unsupported move type: {type(move).__name__}")
        _LOGGER.debug("Played %s (%s)", move, move.description)

    def undo(self, move: Move) -> None:
        """Reverse a previous :meth:`play` of the same *move*."""
        if isinstance(move, QuietMove):
            piece = self._expect(self.take_piece(move.to_sq), move)
            self.set_piece(move.from_sq, piece)
        elif isinstance(move, Capture):
            piece = self._expect(self.take_piece(move.to_sq), move)
            self.set_piece(move.from_sq, piece)
            self.set_piece(move.to_sq, move.capturing)
        elif isinstance(move, EnPassantCapture):
            pawn = self._expect(self.take_piece(move.to_sq), move)
            self.set_piece(move.from_sq, pawn)
            self.set_piece(move.captured_sq, move.capturing)
        elif isinstance(move, PromotionMove):
            self.remove_piece(move.to_sq)
            self.set_piece(move.from_sq, _pawn_of(move.promoting.color))
        elif isinstance(move, PromotionCapture):
            self.set_piece(move.to_sq, move.capturing)
            self.set_piece(move.from_sq, _pawn_of(move.promoting.color))
        elif isinstance(move, Castle):
            king = self._expect(self.take_piece(move.king_to), move)
            rook = self._expect(self.take_piece(move.rook_to), move)
            self.set_piece(move.king_from, king)
            self.set_piece(move.rook_from, rook)
        else:
            raise TypeError(f"Unsupported move type: {type(move).__name__}")
        _LOGGER.debug("Undid %s (%s)", move, move.description)

    @staticmethod
    def _expect(piece: Piece | None, move: Move) -> Piece:
        if piece is None:
            raise IllegalMoveError(f"illegal {move.description}: {move}")
        return piece

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * 8 for _ in range(8)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b._grid[0] = list(_WHITE_BACK_RANK)
        b._grid[1] = [WHITE_PAWN] * 8
        b._grid[6] = [BLACK_PAWN] * 8
        b._grid[7] = list(_BLACK_BACK_RANK)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = [str(p) if p else "." for p in self._grid[rank]]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def _pawn_of(color: PieceColor) -> Piece:
    return Piece(PieceKind.PAWN, color)
