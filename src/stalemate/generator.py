"""Random puzzle generation: a defending king square and a piece set.

The piece sets follow a policy meant to keep a stalemate reachable: small sets
come from hand-picked combinations, larger ones are drawn freely with a cap on
queens. The policy is a heuristic, not a guarantee.
"""

import random

from stalemate.board import PieceKind, Square

__all__ = ["generate_pieces", "random_king_square", "MAX_PIECES", "MAX_QUEENS"]

MAX_PIECES = 10
MAX_QUEENS = 5

_DRAW_POOL = [PieceKind.BISHOP, PieceKind.KNIGHT, PieceKind.ROOK, PieceKind.QUEEN]

_K, _Q, _R, _B, _N = (
    PieceKind.KING, PieceKind.QUEEN, PieceKind.ROOK, PieceKind.BISHOP, PieceKind.KNIGHT,
)

_TWO_PIECE_SETS = [[_K, _Q, _Q], [_K, _Q, _B]]
_THREE_PIECE_BASES = [[_K, _R, _R], [_K, _B, _B], [_K, _N, _N], [_K, _N, _B]]


def generate_pieces(
    max_pieces: int = MAX_PIECES, rng: random.Random | None = None,
) -> list[PieceKind]:
    """King first, then between 2 and ``max_pieces`` attacking pieces."""
    if not 2 <= max_pieces <= MAX_PIECES:
        raise ValueError(f"max_pieces must be between 2 and {MAX_PIECES}, got {max_pieces}")
    rng = rng or random.Random()
    n = rng.randint(2, max_pieces)

    if n == 2:
        return list(rng.choice(_TWO_PIECE_SETS))

    if n == 3:
        choice = rng.randrange(len(_THREE_PIECE_BASES))
        result = list(_THREE_PIECE_BASES[choice])
        if choice == 0:
            # two rooks pair with anything
            result.append(rng.choice(_DRAW_POOL))
        else:
            result.append(rng.choice([_R, _Q]))
        return result

    result = [_K]
    queens = 0
    for _ in range(n):
        pool = _DRAW_POOL if queens < MAX_QUEENS else _DRAW_POOL[:-1]
        kind = rng.choice(pool)
        if kind == _Q:
            queens += 1
        result.append(kind)
    return result


def random_king_square(rng: random.Random | None = None) -> Square:
    """A square off the edge of the board, rows and columns 1 to 6."""
    rng = rng or random.Random()
    return Square(rng.randint(1, 6), rng.randint(1, 6))
