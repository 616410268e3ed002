"""Cleanup after the search: drop consumed pieces, park the rest harmlessly."""

import logging
from collections import Counter

from stalemate.board import (
    BOARD_SIZE,
    PieceKind,
    Placement,
    Square,
    attacks,
    king_adjacency,
    placement_counts,
)
from stalemate.search.placement import SearchState, calculate_exclusion
from stalemate.search.validator import escape_squares

logger = logging.getLogger(__name__)

__all__ = ["remove_used_pieces", "place_leftover_pieces"]


def remove_used_pieces(pieces: list[PieceKind], placement: Placement) -> list[PieceKind]:
    """The pieces not yet on the board: ``pieces`` minus the placement's multiset.

    Order of the survivors is preserved. Raises ValueError if the placement
    holds more of a kind than ``pieces`` does.
    """
    used = Counter(placement_counts(placement))
    available = Counter(pieces)
    for kind, n in used.items():
        if available[kind] < n:
            raise ValueError(
                f"Placement uses {n} {kind.name.lower()}(s) but only "
                f"{available[kind]} are available"
            )
    remaining: list[PieceKind] = []
    for kind in pieces:
        if used[kind] > 0:
            used[kind] -= 1
        else:
            remaining.append(kind)
    return remaining


def place_leftover_pieces(state: SearchState, pieces: list[PieceKind]) -> list[PieceKind]:
    """Place ``pieces`` where they neither attack the king's zone nor block a ray.

    One row-major pass over the board: each piece takes the first acceptable
    square after the previous piece's square. Pieces still waiting when the
    board runs out are returned.
    """
    queue = list(pieces)
    if not queue:
        return []

    adjacency = king_adjacency(state.king_square)
    state.exclusion = calculate_exclusion(state.king_square, state.placement)
    escapes = escape_squares(state.king_square, state.placement, state.board)

    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            sq = Square(row, col)
            if sq in state.exclusion or not state.board.is_empty(sq):
                continue
            kind = queue[0]
            if attacks(state.board, kind, sq) & adjacency:
                continue
            state.occupy(kind, sq)
            # A new piece can shadow a slider's ray into the king's zone.
            if escape_squares(state.king_square, state.placement, state.board) != escapes:
                state.undo()
                continue
            queue.pop(0)
            if not queue:
                return []

    logger.warning(
        "Board exhausted with %d leftover piece(s) unplaced: %s",
        len(queue), "".join(k.symbol for k in queue),
    )
    return queue
