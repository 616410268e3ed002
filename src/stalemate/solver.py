"""Stalemate placement: rank, search, clean up, validate.

The search is best effort. A result may leave the king with an escape square
(the ranking can miss a solution, the budget can run out, or leftover pieces
can be dropped), so callers read ``StalemateResult.is_stalemate`` rather than
assuming success.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from stalemate.board import Board, OutOfBounds, PieceKind, Placement, Square, king_adjacency
from stalemate.search import (
    PlacementSearch,
    SearchBudget,
    SearchOutcome,
    SearchState,
    is_stalemate,
    place_leftover_pieces,
    rank_candidates,
    remove_used_pieces,
    sort_pieces,
)

logger = logging.getLogger(__name__)

__all__ = [
    "StalemateResult",
    "calculate_stalemate",
    "calculate_stalemate_sorted",
    "parse_pieces",
]


@dataclass
class StalemateResult:
    king_square: Square
    placement: Placement
    board: Board
    outcome: SearchOutcome
    nodes: int
    pieces: list[PieceKind]                 # in the order the search tried them
    dropped: list[PieceKind] = field(default_factory=list)
    is_stalemate: bool = False


def parse_pieces(pieces: Iterable[PieceKind | str]) -> list[PieceKind]:
    """Coerce a piece list ('KQB', ['K', 'queen'], ...) and check it has one King."""
    if isinstance(pieces, str):
        pieces = [ch for ch in pieces if not ch.isspace() and ch != ","]
    kinds = [PieceKind.parse(p) for p in pieces]
    kings = kinds.count(PieceKind.KING)
    if kings != 1:
        raise ValueError(f"Piece list must contain exactly one King, found {kings}")
    return kinds


def calculate_stalemate(
    king_square: Square,
    pieces: Iterable[PieceKind | str],
    *,
    presort: bool = False,
    budget: SearchBudget | None = None,
) -> StalemateResult:
    """Place ``pieces`` so the defending king on ``king_square`` is stalemated.

    With ``presort`` the pieces are searched strongest first, which usually
    converges faster on long piece lists.
    """
    if not Board.in_bounds(king_square):
        raise OutOfBounds(f"King square off the board: {king_square}")
    kinds = parse_pieces(pieces)
    if presort:
        kinds = sort_pieces(kinds)

    state = SearchState.fresh(king_square)
    adjacency = king_adjacency(king_square)
    candidates = rank_candidates(state.board, kinds, adjacency)

    search = PlacementSearch(state, kinds, candidates, budget)
    outcome = search.run()

    remaining = remove_used_pieces(kinds, state.placement)
    dropped = place_leftover_pieces(state, remaining)

    solved = is_stalemate(king_square, state.placement, state.board)
    logger.info(
        "King %s, pieces %s: %s (stalemate=%s, %d leftover, %d dropped)",
        king_square.name, "".join(k.symbol for k in kinds), outcome.value,
        solved, len(remaining) - len(dropped), len(dropped),
    )
    return StalemateResult(
        king_square=king_square,
        placement=state.placement,
        board=state.board,
        outcome=outcome,
        nodes=search.nodes,
        pieces=kinds,
        dropped=dropped,
        is_stalemate=solved,
    )


def calculate_stalemate_sorted(
    king_square: Square,
    pieces: Iterable[PieceKind | str],
    *,
    budget: SearchBudget | None = None,
) -> StalemateResult:
    return calculate_stalemate(king_square, pieces, presort=True, budget=budget)
