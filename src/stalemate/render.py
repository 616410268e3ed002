"""Board rendering through python-chess: diagrams, FEN and SVG.

Only reads the board through ``Board.cells``. The defending king is drawn
black and the attackers white, with black to move.
"""

import chess
import chess.svg

from stalemate.board import Board, CellState, Square

__all__ = ["to_chess_board", "board_fen", "render_text", "render_svg"]


def to_chess_board(board: Board) -> chess.Board:
    cb = chess.Board(None)
    cb.turn = chess.BLACK
    for square, state in board.cells():
        if state is CellState.EMPTY:
            continue
        if state is CellState.DEFENDING_KING:
            piece = chess.Piece(chess.KING, chess.BLACK)
        else:
            piece = chess.Piece(state.piece_kind.piece_type, chess.WHITE)
        cb.set_piece_at(square.chess_square, piece)
    return cb


def board_fen(board: Board) -> str:
    """Full FEN with black to move and no castling or en-passant rights."""
    return to_chess_board(board).fen()


def render_text(board: Board, *, unicode: bool = False) -> str:
    cb = to_chess_board(board)
    if unicode:
        return cb.unicode(borders=True)
    return str(cb)


def render_svg(board: Board, king_square: Square | None = None, size: int = 400) -> str:
    """SVG diagram; the defending king's square is highlighted when given."""
    fill = {}
    if king_square is not None:
        fill[king_square.chess_square] = "#cc0000cc"
    return chess.svg.board(to_chess_board(board), size=size, fill=fill)
