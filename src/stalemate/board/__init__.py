"""Board model, attack patterns and king adjacency.

Everything here is a pure function of a Board and a square; no search state.
"""

from stalemate.board.attacks import attacked_adjacent, attacks, king_adjacency
from stalemate.board.constants import BOARD_SIZE
from stalemate.board.grid import Board
from stalemate.board.types import (
    CellState,
    InvalidPieceKind,
    OutOfBounds,
    PieceKind,
    Placement,
    Square,
    placed_squares,
    placement_counts,
)

__all__ = [
    "BOARD_SIZE",
    "Board",
    "CellState",
    "InvalidPieceKind",
    "OutOfBounds",
    "PieceKind",
    "Placement",
    "Square",
    "attacked_adjacent",
    "attacks",
    "king_adjacency",
    "placed_squares",
    "placement_counts",
]
