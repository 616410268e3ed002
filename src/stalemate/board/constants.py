"""Board geometry and movement vectors shared across the board submodules."""

__all__ = [
    "BOARD_SIZE",
    "KING_STEPS",
    "KNIGHT_OFFSETS",
    "ORTHOGONAL_DIRS",
    "DIAGONAL_DIRS",
    "KNIGHT_ALIASES",
]

BOARD_SIZE = 8

# (d_row, d_col) pairs
ORTHOGONAL_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))
DIAGONAL_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (-1, -1), (1, -1), (-1, 1))

KING_STEPS: tuple[tuple[int, int], ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 2), (2, 1), (1, -2), (2, -1),
    (-1, 2), (-2, 1), (-1, -2), (-2, -1),
)

# Older piece lists spell the knight "H" (horse).
KNIGHT_ALIASES = frozenset({"N", "H"})
