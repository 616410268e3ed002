"""Placement search: candidate ranking, ordering, backtracking, cleanup, validation."""

from stalemate.search.leftover import place_leftover_pieces, remove_used_pieces
from stalemate.search.ordering import sort_pieces
from stalemate.search.placement import (
    PlacementSearch,
    SearchBudget,
    SearchOutcome,
    SearchState,
    calculate_exclusion,
)
from stalemate.search.ranker import best_squares, rank_candidates
from stalemate.search.validator import escape_squares, is_stalemate

__all__ = [
    "PlacementSearch",
    "SearchBudget",
    "SearchOutcome",
    "SearchState",
    "best_squares",
    "calculate_exclusion",
    "escape_squares",
    "is_stalemate",
    "place_leftover_pieces",
    "rank_candidates",
    "remove_used_pieces",
    "sort_pieces",
]
