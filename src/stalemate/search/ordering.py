"""Piece ordering by attack power before the search starts."""

from stalemate.board import PieceKind

# Lower sorts first. A queen's candidates cover a rook's, so queens lead.
_POWER_RANK = {
    PieceKind.QUEEN: 0,
    PieceKind.ROOK: 1,
    PieceKind.KNIGHT: 2,
    PieceKind.BISHOP: 3,
}


def sort_pieces(pieces: list[PieceKind]) -> list[PieceKind]:
    """Return the pieces with the king first, then queens, rooks, knights, bishops.

    Only the search order changes; the multiset of pieces is preserved.
    """
    kings = [p for p in pieces if p == PieceKind.KING]
    others = sorted((p for p in pieces if p != PieceKind.KING), key=_POWER_RANK.__getitem__)
    return kings + others
