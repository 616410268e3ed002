"""Attack and adjacency computation under the blocking model used by the search.

Sliding rays stop at the first occupied square and do not include it; the king
only reaches empty neighbours; knights are never blocked. Unlike real chess,
an occupied square is never attacked by a slider or the king.
"""

from stalemate.board.constants import (
    DIAGONAL_DIRS,
    KING_STEPS,
    KNIGHT_OFFSETS,
    ORTHOGONAL_DIRS,
)
from stalemate.board.grid import Board
from stalemate.board.types import OutOfBounds, PieceKind, Square

__all__ = [
    "king_adjacency",
    "attacks",
    "attacked_adjacent",
]


_SLIDER_DIRS = {
    PieceKind.QUEEN: (ORTHOGONAL_DIRS, DIAGONAL_DIRS),
    PieceKind.ROOK: (ORTHOGONAL_DIRS,),
    PieceKind.BISHOP: (DIAGONAL_DIRS,),
}


def king_adjacency(square: Square) -> set[Square]:
    """The king's square plus its in-bounds compass neighbours."""
    if not Board.in_bounds(square):
        raise OutOfBounds(f"Square off the board: {square}")
    adjacent = {square}
    for dr, dc in KING_STEPS:
        neighbour = square.offset(dr, dc)
        if Board.in_bounds(neighbour):
            adjacent.add(neighbour)
    return adjacent


def _walk_rays(
    board: Board,
    start: Square,
    directions: tuple[tuple[int, int], ...],
    out: set[Square],
) -> None:
    """Add every empty square along each ray until the edge or a blocker."""
    for dr, dc in directions:
        sq = start.offset(dr, dc)
        while board.in_bounds(sq) and board.is_empty(sq):
            out.add(sq)
            sq = sq.offset(dr, dc)


def attacks(board: Board, kind: PieceKind | str, location: Square) -> set[Square]:
    """Squares attacked by a piece of ``kind`` standing on ``location``."""
    kind = PieceKind.parse(kind)
    if not board.in_bounds(location):
        raise OutOfBounds(f"Square off the board: {location}")

    locs: set[Square] = set()
    if kind == PieceKind.KING:
        for dr, dc in KING_STEPS:
            sq = location.offset(dr, dc)
            if board.in_bounds(sq) and board.is_empty(sq):
                locs.add(sq)
    elif kind == PieceKind.KNIGHT:
        for dr, dc in KNIGHT_OFFSETS:
            sq = location.offset(dr, dc)
            if board.in_bounds(sq):
                locs.add(sq)
    else:
        for directions in _SLIDER_DIRS[kind]:
            _walk_rays(board, location, directions, locs)
    return locs


def attacked_adjacent(
    board: Board, kind: PieceKind, location: Square, adjacency: set[Square],
) -> int:
    """How many of the king's adjacency squares this piece would attack."""
    return len(adjacency) - len(adjacency - attacks(board, kind, location))
