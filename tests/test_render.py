"""Tests for python-chess rendering."""

import chess

from stalemate.board import Board, CellState, Square
from stalemate.render import board_fen, render_svg, render_text, to_chess_board


def _board():
    board = Board()
    board.place_defender(Square(1, 1))
    board.set(Square(1, 3), CellState.KING)
    board.set(Square(0, 3), CellState.QUEEN)
    board.set(Square(3, 0), CellState.QUEEN)
    return board


class TestToChessBoard:
    def test_colors_and_turn(self):
        cb = to_chess_board(_board())
        assert cb.turn == chess.BLACK
        assert cb.piece_at(chess.B7) == chess.Piece(chess.KING, chess.BLACK)
        assert cb.piece_at(chess.D7) == chess.Piece(chess.KING, chess.WHITE)
        assert cb.piece_at(chess.A5) == chess.Piece(chess.QUEEN, chess.WHITE)

    def test_python_chess_agrees_on_stalemate(self):
        assert to_chess_board(_board()).is_stalemate()

    def test_empty_board(self):
        assert to_chess_board(Board()).piece_map() == {}


class TestFen:
    def test_fen(self):
        assert board_fen(_board()) == "3Q4/1k1K4/8/Q7/8/8/8/8 b - - 0 1"


class TestRenderText:
    def test_ascii(self):
        text = render_text(_board())
        assert text.splitlines()[1] == ". k . K . . . ."

    def test_unicode(self):
        text = render_text(_board(), unicode=True)
        assert "♚" in text  # black king
        assert "♕" in text  # white queen


class TestRenderSvg:
    def test_svg(self):
        svg = render_svg(_board(), Square(1, 1), size=200)
        assert svg.startswith("<svg")
        assert 'width="200"' in svg

    def test_svg_without_highlight(self):
        assert "<svg" in render_svg(_board())
