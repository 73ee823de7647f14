"""Exception types raised by the core domain layer."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for all chesscore errors."""


class MalformedCoordinateError(ChessError, ValueError):
    """A file letter, rank digit or square name could not be parsed."""


class IllegalMoveError(ChessError, RuntimeError):
    """A move does not match the board it is applied to.

    Raised by :meth:`Board.play` / :meth:`Board.undo` when a square the move
    expects to be occupied is empty. This is a caller contract violation; the
    board may already be partially mutated when it is raised.
    """
