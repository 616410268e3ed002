"""Greedy candidate ranking: squares that take the most escape squares away."""

import logging

from stalemate.board import BOARD_SIZE, Board, PieceKind, Square, attacked_adjacent

logger = logging.getLogger(__name__)


def best_squares(board: Board, kind: PieceKind, adjacency: set[Square]) -> list[Square]:
    """All squares outside ``adjacency`` attacking the most adjacency squares.

    Squares are scanned row-major and ties are kept in scan order. If no
    square attacks anything in ``adjacency`` the result is empty.
    """
    best = 0
    result: list[Square] = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            sq = Square(row, col)
            if sq in adjacency:
                continue
            n = attacked_adjacent(board, kind, sq, adjacency)
            if n > best:
                best = n
                result = [sq]
            elif n == best and best > 0:
                result.append(sq)
    return result


def rank_candidates(
    board: Board, pieces: list[PieceKind], adjacency: set[Square],
) -> dict[PieceKind, list[Square]]:
    """Candidate list per distinct kind in ``pieces``, computed once each."""
    candidates: dict[PieceKind, list[Square]] = {}
    for kind in pieces:
        if kind in candidates:
            continue
        candidates[kind] = best_squares(board, kind, adjacency)
        logger.debug("%s: %d candidate squares", kind.name.lower(), len(candidates[kind]))
    return candidates
