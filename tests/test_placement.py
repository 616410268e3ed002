"""Tests for the backtracking placement search and its state."""

import itertools

import pytest

from stalemate.board import Board, CellState, PieceKind, Square, king_adjacency
from stalemate.search import (
    PlacementSearch,
    SearchBudget,
    SearchOutcome,
    SearchState,
    calculate_exclusion,
    rank_candidates,
)

K, Q, B = PieceKind.KING, PieceKind.QUEEN, PieceKind.BISHOP


def _search(king, pieces, budget=None, **kwargs):
    state = SearchState.fresh(king)
    candidates = rank_candidates(state.board, pieces, king_adjacency(king))
    return state, PlacementSearch(state, pieces, candidates, budget, **kwargs)


# ---------------------------------------------------------------------------
# SearchState
# ---------------------------------------------------------------------------


class TestSearchState:
    def test_fresh_holds_only_defender(self):
        state = SearchState.fresh(Square(1, 1))
        assert state.board.occupied() == {Square(1, 1): CellState.DEFENDING_KING}
        assert state.placement == {}
        assert state.exclusion == king_adjacency(Square(1, 1))

    def test_occupy_updates_everything(self):
        state = SearchState.fresh(Square(1, 1))
        state.occupy(Q, Square(3, 0))
        assert state.board.get(Square(3, 0)) is CellState.QUEEN
        assert state.placement == {Q: [Square(3, 0)]}
        assert Square(3, 0) in state.exclusion

    def test_undo_restores_previous_state(self):
        state = SearchState.fresh(Square(1, 1))
        state.occupy(K, Square(1, 3))
        before_board = state.board.occupied()
        before_placement = {k: list(v) for k, v in state.placement.items()}
        before_exclusion = set(state.exclusion)

        state.occupy(Q, Square(3, 0))
        state.occupy(Q, Square(0, 3))
        state.undo()
        state.undo()

        assert state.board.occupied() == before_board
        assert state.placement == before_placement
        assert state.exclusion == before_exclusion
        assert Q not in state.placement

    def test_calculate_exclusion(self):
        placement = {Q: [Square(5, 5)]}
        assert calculate_exclusion(Square(0, 0), placement) == {
            Square(0, 0), Square(0, 1), Square(1, 0), Square(1, 1), Square(5, 5),
        }


# ---------------------------------------------------------------------------
# SearchBudget
# ---------------------------------------------------------------------------


class TestSearchBudget:
    def test_unbounded_default(self):
        budget = SearchBudget()
        assert budget.max_nodes is None
        assert budget.time_limit is None

    @pytest.mark.parametrize("kwargs", [{"max_nodes": 0}, {"time_limit": 0}, {"time_limit": -1.0}])
    def test_rejects_non_positive(self, kwargs):
        with pytest.raises(ValueError):
            SearchBudget(**kwargs)


# ---------------------------------------------------------------------------
# PlacementSearch
# ---------------------------------------------------------------------------


class TestPlacementSearch:
    def test_solves_king_and_two_queens(self):
        state, search = _search(Square(1, 1), [K, Q, Q])
        assert search.run() is SearchOutcome.SOLVED
        assert state.placement == {K: [Square(1, 3)], Q: [Square(0, 3), Square(3, 0)]}
        assert state.is_stalemate()
        assert search.nodes == 3

    def test_solves_king_queen_bishop(self):
        state, search = _search(Square(1, 1), [K, Q, B])
        assert search.run() is SearchOutcome.SOLVED
        assert state.placement == {K: [Square(1, 3)], Q: [Square(3, 0)], B: [Square(2, 3)]}

    def test_board_matches_placement(self):
        state, search = _search(Square(1, 1), [K, Q, Q])
        search.run()
        expected = Board.from_placement(Square(1, 1), state.placement)
        assert state.board.occupied() == expected.occupied()

    def test_exhausted_leaves_clean_state(self):
        state, search = _search(Square(1, 1), [K])
        assert search.run() is SearchOutcome.EXHAUSTED
        assert state.placement == {}
        assert state.trail == []
        assert state.board.occupied() == {Square(1, 1): CellState.DEFENDING_KING}

    def test_node_budget_unwinds_every_frame(self):
        state, search = _search(Square(1, 1), [K, Q, Q], SearchBudget(max_nodes=1))
        assert search.run() is SearchOutcome.BUDGET_EXCEEDED
        assert search.outcome is SearchOutcome.BUDGET_EXCEEDED
        assert state.placement == {}
        assert state.trail == []
        assert state.board.occupied() == {Square(1, 1): CellState.DEFENDING_KING}
        assert state.exclusion == king_adjacency(Square(1, 1))

    def test_time_budget(self):
        ticks = itertools.count(0.0, 100.0)
        state, search = _search(
            Square(1, 1), [K, Q, Q], SearchBudget(time_limit=1.0), clock=lambda: next(ticks),
        )
        assert search.run() is SearchOutcome.BUDGET_EXCEEDED
        assert state.placement == {}

    def test_time_budget_not_reached(self):
        state, search = _search(
            Square(1, 1), [K, Q, Q], SearchBudget(time_limit=1.0), clock=lambda: 0.0,
        )
        assert search.run() is SearchOutcome.SOLVED

    def test_missing_candidates_skip_kind(self):
        state = SearchState.fresh(Square(1, 1))
        search = PlacementSearch(state, [K, Q], {K: [], Q: []})
        assert search.run() is SearchOutcome.EXHAUSTED
        assert state.placement == {}
