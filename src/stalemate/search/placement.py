"""Backtracking placement search.

Each frame assigns one piece to one of its ranked candidate squares and
recurses to the next piece. The board, the placement and the exclusion set are
owned by a SearchState passed down explicitly; every tentative occupation is
recorded on an undo trail and rolled back on the failure path.
"""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from stalemate.board import (
    Board,
    CellState,
    PieceKind,
    Placement,
    Square,
    king_adjacency,
    placed_squares,
)
from stalemate.search.validator import is_stalemate

logger = logging.getLogger(__name__)

__all__ = [
    "SearchBudget",
    "SearchOutcome",
    "SearchState",
    "PlacementSearch",
    "calculate_exclusion",
]


class SearchOutcome(enum.Enum):
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    BUDGET_EXCEEDED = "budget_exceeded"


@dataclass
class SearchBudget:
    """External bound on the search. None means unbounded."""
    max_nodes: int | None = None
    time_limit: float | None = None   # seconds

    def __post_init__(self) -> None:
        if self.max_nodes is not None and self.max_nodes < 1:
            raise ValueError(f"max_nodes must be positive, got {self.max_nodes}")
        if self.time_limit is not None and self.time_limit <= 0:
            raise ValueError(f"time_limit must be positive, got {self.time_limit}")


def calculate_exclusion(king_square: Square, placement: Placement) -> set[Square]:
    """Squares unavailable for new pieces: king adjacency plus occupied squares."""
    return king_adjacency(king_square) | placed_squares(placement)


@dataclass
class SearchState:
    board: Board
    king_square: Square
    placement: Placement = field(default_factory=dict)
    exclusion: set[Square] = field(default_factory=set)
    trail: list[tuple[PieceKind, Square]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.exclusion = calculate_exclusion(self.king_square, self.placement)

    @classmethod
    def fresh(cls, king_square: Square) -> SearchState:
        """A new board holding only the defending king."""
        board = Board()
        board.place_defender(king_square)
        return cls(board=board, king_square=king_square)

    def occupy(self, kind: PieceKind, square: Square) -> None:
        self.board.set(square, CellState.of(kind))
        self.placement.setdefault(kind, []).append(square)
        self.exclusion.add(square)
        self.trail.append((kind, square))

    def undo(self) -> None:
        """Roll back the most recent occupation."""
        kind, square = self.trail.pop()
        self.board.set(square, CellState.EMPTY)
        squares = self.placement[kind]
        squares.pop()
        if not squares:
            del self.placement[kind]
        self.exclusion = calculate_exclusion(self.king_square, self.placement)

    def is_stalemate(self) -> bool:
        return is_stalemate(self.king_square, self.placement, self.board)


class _BudgetExceeded(Exception):
    pass


class PlacementSearch:
    """Assign each piece, in list order, to one of its candidate squares."""

    def __init__(
        self,
        state: SearchState,
        pieces: list[PieceKind],
        candidates: dict[PieceKind, list[Square]],
        budget: SearchBudget | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._state = state
        self._pieces = pieces
        self._candidates = candidates
        self._budget = budget or SearchBudget()
        self._clock = clock
        self._deadline: float | None = None
        self.nodes = 0  # frames that tried at least one candidate list
        self.outcome: SearchOutcome | None = None

    def run(self) -> SearchOutcome:
        if self._budget.time_limit is not None:
            self._deadline = self._clock() + self._budget.time_limit
        self.nodes = 0
        try:
            solved = self._place(0)
        except _BudgetExceeded:
            # Every frame has already undone its trial on the way out.
            logger.warning(
                "Search budget exceeded after %d nodes (max_nodes=%s, time_limit=%s)",
                self.nodes, self._budget.max_nodes, self._budget.time_limit,
            )
            self.outcome = SearchOutcome.BUDGET_EXCEEDED
            return self.outcome
        self.outcome = SearchOutcome.SOLVED if solved else SearchOutcome.EXHAUSTED
        logger.info("Search %s after %d nodes", self.outcome.value, self.nodes)
        return self.outcome

    def _tick(self) -> None:
        self.nodes += 1
        if self._budget.max_nodes is not None and self.nodes > self._budget.max_nodes:
            raise _BudgetExceeded
        if self._deadline is not None and self._clock() > self._deadline:
            raise _BudgetExceeded

    def _place(self, index: int) -> bool:
        state = self._state
        if state.is_stalemate():
            return True
        if index >= len(self._pieces):
            return False
        self._tick()

        kind = self._pieces[index]
        for sq in self._candidates.get(kind, []):
            if sq in state.exclusion:
                continue
            state.occupy(kind, sq)
            try:
                solved = self._place(index + 1)
            except _BudgetExceeded:
                state.undo()
                raise
            if solved:
                return True
            state.undo()
        state.exclusion = calculate_exclusion(state.king_square, state.placement)
        return False
