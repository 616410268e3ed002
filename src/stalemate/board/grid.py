"""The 8x8 board owned by a single placement computation."""

from __future__ import annotations

from collections.abc import Iterator

from stalemate.board.constants import BOARD_SIZE
from stalemate.board.types import CellState, OutOfBounds, Placement, Square

__all__ = ["Board"]


class Board:
    """Fixed 8x8 grid of cell states.

    A Board is never shared between computations: the solver creates one per
    call, and anything holding it afterwards (a renderer, a report) only reads
    it through ``get`` or ``cells``.
    """

    def __init__(self) -> None:
        self._cells: list[list[CellState]] = [
            [CellState.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    @classmethod
    def from_placement(cls, king_square: Square, placement: Placement) -> Board:
        """Build a board holding the defending king and every placed piece.

        Raises ValueError if two entries claim the same square.
        """
        board = cls()
        board.place_defender(king_square)
        for kind, squares in placement.items():
            for sq in squares:
                if not board.is_empty(sq):
                    raise ValueError(f"Square {sq.name} is occupied twice")
                board.set(sq, CellState.of(kind))
        return board

    @staticmethod
    def in_bounds(square: Square) -> bool:
        return 0 <= square.row < BOARD_SIZE and 0 <= square.col < BOARD_SIZE

    def _check(self, square: Square) -> None:
        if not self.in_bounds(square):
            raise OutOfBounds(f"Square off the board: {square}")

    def get(self, square: Square) -> CellState:
        self._check(square)
        return self._cells[square.row][square.col]

    def set(self, square: Square, state: CellState) -> None:
        self._check(square)
        self._cells[square.row][square.col] = state

    def is_empty(self, square: Square) -> bool:
        return self.get(square) is CellState.EMPTY

    def place_defender(self, square: Square) -> None:
        self.set(square, CellState.DEFENDING_KING)

    def clear(self) -> None:
        for row in self._cells:
            row[:] = [CellState.EMPTY] * BOARD_SIZE

    def cells(self) -> Iterator[tuple[Square, CellState]]:
        """Row-major walk over every cell, top-left first."""
        for r, row in enumerate(self._cells):
            for c, state in enumerate(row):
                yield Square(r, c), state

    def occupied(self) -> dict[Square, CellState]:
        return {sq: state for sq, state in self.cells() if state is not CellState.EMPTY}
