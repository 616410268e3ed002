"""JSON-friendly serialization of a StalemateResult."""

from __future__ import annotations

from stalemate.render import board_fen
from stalemate.solver import StalemateResult

# Fixed key order for the placement map
_SYMBOL_ORDER = "KQRBN"


def _square_dict(square) -> dict:
    return {"name": square.name, "row": square.row, "col": square.col}


def serialize_result(result: StalemateResult) -> dict:
    """Plain-dict report: squares by algebraic name, kinds by symbol."""
    placement = {
        kind.symbol: [sq.name for sq in squares]
        for kind, squares in sorted(
            result.placement.items(), key=lambda kv: _SYMBOL_ORDER.index(kv[0].symbol),
        )
        if squares
    }
    return {
        "king": _square_dict(result.king_square),
        "pieces": "".join(k.symbol for k in result.pieces),
        "placement": placement,
        "outcome": result.outcome.value,
        "nodes": result.nodes,
        "stalemate": result.is_stalemate,
        "dropped": [k.symbol for k in result.dropped],
        "fen": board_fen(result.board),
    }
