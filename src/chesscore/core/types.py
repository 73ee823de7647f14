"""Board coordinates: files, ranks and squares.

Files and ranks are zero-based internally::

    file a=0 ... h=7
    rank 1=0 ... 8=7

A :class:`Square` pairs one of each, so ``Square.parse("a1").indices() == (0, 0)``
and ``Square.parse("h8").indices() == (7, 7)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chesscore.core.errors import MalformedCoordinateError

_FILE_LETTERS = "abcdefgh"
_RANK_DIGITS = "12345678"


def _is_int(value: object) -> bool:
    # bool subclasses int but is never a coordinate
    return isinstance(value, int) and not isinstance(value, bool)


def _is_index(value: object) -> bool:
    return _is_int(value) and 0 <= value <= 7  # type: ignore[operator]


@dataclass(frozen=True, slots=True, order=True)
class File:
    """Board column, 0 (a) to 7 (h)."""

    index: int

    def __post_init__(self) -> None:
        if not _is_index(self.index):
            raise MalformedCoordinateError(f"Invalid file index: {self.index!r}")

    @classmethod
    def parse(cls, text: str) -> File:
        """Parse a single file letter, e.g. 'e' or 'E' → file 4."""
        if len(text) != 1 or text.lower() not in _FILE_LETTERS:
            raise MalformedCoordinateError(f"Invalid file: {text!r}")
        return cls(_FILE_LETTERS.index(text.lower()))

    def __str__(self) -> str:
        return _FILE_LETTERS[self.index]


@dataclass(frozen=True, slots=True, order=True)
class Rank:
    """Board row, 0 (rank 1) to 7 (rank 8)."""

    index: int

    def __post_init__(self) -> None:
        if not _is_index(self.index):
            raise MalformedCoordinateError(f"Invalid rank index: {self.index!r}")

    @classmethod
    def from_number(cls, number: int) -> Rank:
        """Create rank from its 1-based number, e.g. 4 → rank index 3."""
        if not _is_int(number) or not 1 <= number <= 8:
            raise MalformedCoordinateError(f"Invalid rank: {number!r}")
        return cls(number - 1)

    @classmethod
    def parse(cls, text: str) -> Rank:
        """Parse a single rank digit, e.g. '4' → rank index 3."""
        if len(text) != 1 or text not in _RANK_DIGITS:
            raise MalformedCoordinateError(f"Invalid rank: {text!r}")
        return cls(_RANK_DIGITS.index(text))

    @property
    def number(self) -> int:
        return self.index + 1

    def __str__(self) -> str:
        return _RANK_DIGITS[self.index]


FileLike: TypeAlias = File | str
RankLike: TypeAlias = Rank | str | int


def _to_file(value: FileLike) -> File:
    if isinstance(value, File):
        return value
    if isinstance(value, str):
        return File.parse(value)
    raise MalformedCoordinateError(f"Invalid file: {value!r}")


def _to_rank(value: RankLike) -> Rank:
    if isinstance(value, Rank):
        return value
    if isinstance(value, str):
        return Rank.parse(value)
    return Rank.from_number(value)


@dataclass(frozen=True, slots=True)
class Square:
    """One of the 64 board cells."""

    file: File
    rank: Rank

    @classmethod
    def of(cls, file: FileLike, rank: RankLike) -> Square:
        """Build a square from anything convertible to a file and a rank.

        Files accept a :class:`File` or a letter; ranks accept a :class:`Rank`,
        a digit string, or a 1-based number::

            Square.of("e", "4") == Square.of("e", 4) == Square.parse("e4")
        """
        return cls(_to_file(file), _to_rank(rank))

    @classmethod
    def parse(cls, name: str) -> Square:
        """Parse a square name, e.g. 'e4'."""
        if len(name) != 2:
            raise MalformedCoordinateError(f"Invalid square name: {name!r}")
        return cls(File.parse(name[0]), Rank.parse(name[1]))

    def indices(self) -> tuple[int, int]:
        """Zero-based ``(file, rank)`` pair for grid addressing."""
        return self.file.index, self.rank.index

    def __str__(self) -> str:
        return f"{self.file}{self.rank}"


SquareLike: TypeAlias = Square | str


def to_square(value: SquareLike) -> Square:
    """Coerce a :class:`Square` or a square name into a :class:`Square`."""
    if isinstance(value, Square):
        return value
    return Square.parse(value)


def all_squares() -> list[Square]:
    """Every square, a1 through h8 in rank-major order."""
    return [Square(File(f), Rank(r)) for r in range(8) for f in range(8)]


# ── Named square constants ──────────────────────────────────────────────────

_SQUARES = all_squares()

A1, B1, C1, D1, E1, F1, G1, H1 = _SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = _SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = _SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = _SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = _SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = _SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = _SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = _SQUARES[56:64]
