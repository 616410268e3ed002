"""Board types: squares, piece kinds, cell states, placements and errors."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

import chess

from stalemate.board.constants import BOARD_SIZE, KNIGHT_ALIASES

__all__ = [
    "Square",
    "PieceKind",
    "CellState",
    "Placement",
    "InvalidPieceKind",
    "OutOfBounds",
    "placed_squares",
    "placement_counts",
]


class InvalidPieceKind(ValueError):
    """A value that does not name one of the five attacking piece kinds."""


class OutOfBounds(IndexError):
    """A square outside the 8x8 board."""


_ROW_COL_RE = re.compile(r"^\s*(-?\d+)\s*,\s*(-?\d+)\s*$")


@dataclass(frozen=True, order=True)
class Square:
    """A board square. Row 0 is rank 8 (top), column 0 is the a-file."""

    row: int
    col: int

    def in_bounds(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)

    @property
    def chess_square(self) -> chess.Square:
        """python-chess square index (a1 = 0)."""
        if not self.in_bounds():
            raise OutOfBounds(f"Square off the board: {self}")
        return chess.square(self.col, BOARD_SIZE - 1 - self.row)

    @property
    def name(self) -> str:
        """Algebraic name, e.g. Square(1, 1).name == 'b7'."""
        return chess.square_name(self.chess_square)

    @classmethod
    def from_chess_square(cls, sq: chess.Square) -> Square:
        return cls(BOARD_SIZE - 1 - chess.square_rank(sq), chess.square_file(sq))

    @classmethod
    def parse(cls, text: str) -> Square:
        """Parse ``"b7"`` or ``"row,col"``.

        Raises ValueError for text that is neither form, and OutOfBounds for a
        row/col pair off the board.
        """
        m = _ROW_COL_RE.match(text)
        if m:
            square = cls(int(m.group(1)), int(m.group(2)))
            if not square.in_bounds():
                raise OutOfBounds(f"Square off the board: {text!r}")
            return square
        try:
            return cls.from_chess_square(chess.parse_square(text.strip().lower()))
        except ValueError as e:
            raise ValueError(f"Invalid square: {text!r}") from e

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


class PieceKind(enum.Enum):
    KING = "K"
    QUEEN = "Q"
    ROOK = "R"
    BISHOP = "B"
    KNIGHT = "N"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def piece_type(self) -> chess.PieceType:
        return _PIECE_TYPES[self]

    @classmethod
    def parse(cls, value: object) -> PieceKind:
        """Coerce a symbol ('Q', 'h'), a name ('queen') or a PieceKind.

        Anything else raises InvalidPieceKind.
        """
        if isinstance(value, PieceKind):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in KNIGHT_ALIASES:
                return cls.KNIGHT
            if len(key) == 1:
                try:
                    return cls(key)
                except ValueError:
                    pass
            elif key in cls.__members__:
                return cls[key]
        raise InvalidPieceKind(f"Invalid piece kind: {value!r}")


_PIECE_TYPES: dict[PieceKind, chess.PieceType] = {
    PieceKind.KING: chess.KING,
    PieceKind.QUEEN: chess.QUEEN,
    PieceKind.ROOK: chess.ROOK,
    PieceKind.BISHOP: chess.BISHOP,
    PieceKind.KNIGHT: chess.KNIGHT,
}


class CellState(enum.Enum):
    EMPTY = "."
    DEFENDING_KING = "k"
    KING = "K"
    QUEEN = "Q"
    ROOK = "R"
    BISHOP = "B"
    KNIGHT = "N"

    @classmethod
    def of(cls, kind: PieceKind) -> CellState:
        return cls(kind.value)

    @property
    def piece_kind(self) -> PieceKind | None:
        """The attacking piece on this cell, None for empty or the defender."""
        if self in (CellState.EMPTY, CellState.DEFENDING_KING):
            return None
        return PieceKind(self.value)


# Insertion order within each list is the order pieces were placed.
Placement = dict[PieceKind, list[Square]]


def placed_squares(placement: Placement) -> set[Square]:
    return {sq for squares in placement.values() for sq in squares}


def placement_counts(placement: Placement) -> dict[PieceKind, int]:
    return {kind: len(squares) for kind, squares in placement.items() if squares}
