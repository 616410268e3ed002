"""Stalemate predicate over a placement."""

from stalemate.board import Board, Placement, Square, attacks, king_adjacency

__all__ = ["escape_squares", "is_stalemate"]


def escape_squares(
    king_square: Square, placement: Placement, board: Board | None = None,
) -> set[Square]:
    """King-adjacency squares (the king's own included) left unattacked.

    ``board`` must agree with ``placement`` when given; otherwise one is built
    from the placement so the check stays a pure function of its inputs.
    """
    if board is None:
        board = Board.from_placement(king_square, placement)
    remaining = king_adjacency(king_square)
    for kind, squares in placement.items():
        for sq in squares:
            remaining -= attacks(board, kind, sq)
    return remaining


def is_stalemate(
    king_square: Square, placement: Placement, board: Board | None = None,
) -> bool:
    """True when the only square left to the king is the one it stands on."""
    return escape_squares(king_square, placement, board) == {king_square}
