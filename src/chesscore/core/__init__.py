"""Core domain layer: pure chess logic with zero external dependencies.

Quick start::

    from chesscore.core import Board, QuietMove, Square

    board = Board.initial()
    move = QuietMove(Square.parse("e2"), Square.parse("e4"))
    board.play(move)
    board.undo(move)
"""

from chesscore.core.board import Board
from chesscore.core.enums import PieceColor, PieceKind
from chesscore.core.errors import ChessError, IllegalMoveError, MalformedCoordinateError
from chesscore.core.move import (
    KINGSIDE_CASTLE_BLACK,
    KINGSIDE_CASTLE_WHITE,
    QUEENSIDE_CASTLE_BLACK,
    QUEENSIDE_CASTLE_WHITE,
    Capture,
    Castle,
    CastleSide,
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
from chesscore.core.types import File, Rank, Square, all_squares

__all__ = [
    # Enums
    "PieceColor",
    "PieceKind",
    # Errors
    "ChessError",
    "IllegalMoveError",
    "MalformedCoordinateError",
    # Coordinates
    "File",
    "Rank",
    "Square",
    "all_squares",
    # Pieces
    "Piece",
    "WHITE_PAWN",
    "WHITE_KNIGHT",
    "WHITE_BISHOP",
    "WHITE_ROOK",
    "WHITE_QUEEN",
    "WHITE_KING",
    "BLACK_PAWN",
    "BLACK_KNIGHT",
    "BLACK_BISHOP",
    "BLACK_ROOK",
    "BLACK_QUEEN",
    "BLACK_KING",
    # Moves
    "Move",
    "QuietMove",
    "Capture",
    "EnPassantCapture",
    "PromotionMove",
    "PromotionCapture",
    "Castle",
    "CastleSide",
    "KINGSIDE_CASTLE_WHITE",
    "QUEENSIDE_CASTLE_WHITE",
    "KINGSIDE_CASTLE_BLACK",
    "QUEENSIDE_CASTLE_BLACK",
    # Board
    "Board",
]
