"""CLI utility for single stalemate puzzles.

Usage:
    python -m stalemate.cli [--king SQUARE] [--pieces PIECES]
        [--max-pieces N] [--seed N] [--presort | --no-presort]
        [--node-limit N] [--time-limit SECONDS]
        [--board] [--svg FILE] [--verbose]

Squares are algebraic ("b7") or "row,col" with row 0 at the top. Pieces are
symbols K Q R B N, e.g. "KQB". Missing king square or pieces are generated
at random. Prints the JSON report; exits 1 when no stalemate was found.
"""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys

from stalemate.board import InvalidPieceKind, OutOfBounds, Square
from stalemate.config import Settings
from stalemate.generator import MAX_PIECES, generate_pieces, random_king_square
from stalemate.render import render_svg, render_text
from stalemate.report import serialize_result
from stalemate.search import SearchBudget
from stalemate.solver import calculate_stalemate


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Place pieces so the defending king is stalemated",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--king", help="Defending king square (default: random)")
    parser.add_argument("--pieces", help="Piece symbols, e.g. KQB (default: random)")
    parser.add_argument(
        "--max-pieces", type=int, default=settings.max_generated_pieces,
        help=f"Upper bound for random piece sets, 2 to {MAX_PIECES} "
        f"(default: {settings.max_generated_pieces})",
    )
    parser.add_argument("--seed", type=int, help="Seed for random king and pieces")
    parser.add_argument(
        "--presort", action=argparse.BooleanOptionalAction, default=settings.presort,
        help="Search strongest pieces first",
    )
    parser.add_argument(
        "--node-limit", type=int, default=settings.search_node_limit,
        help="Stop the search after this many nodes",
    )
    parser.add_argument(
        "--time-limit", type=float, default=settings.search_time_limit,
        help="Stop the search after this many seconds",
    )
    parser.add_argument(
        "--board", action="store_true",
        help="Print a board diagram to stderr",
    )
    parser.add_argument("--svg", metavar="FILE", help="Write an SVG diagram to FILE")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def _run(args: argparse.Namespace, settings: Settings) -> dict:
    if not 2 <= args.max_pieces <= MAX_PIECES:
        raise ValueError(f"--max-pieces must be between 2 and {MAX_PIECES}, got {args.max_pieces}")
    rng = random.Random(args.seed)
    king = Square.parse(args.king) if args.king else random_king_square(rng)
    pieces = args.pieces if args.pieces else generate_pieces(args.max_pieces, rng)
    budget = SearchBudget(max_nodes=args.node_limit, time_limit=args.time_limit)

    result = calculate_stalemate(king, pieces, presort=args.presort, budget=budget)

    if args.board:
        print(render_text(result.board, unicode=True), file=sys.stderr)
    if args.svg:
        with open(args.svg, "w", encoding="utf-8") as f:
            f.write(render_svg(result.board, result.king_square, size=settings.svg_size))
    return serialize_result(result)


def main(argv: list[str] | None = None) -> int:
    settings = Settings()
    args = _build_parser(settings).parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        report = _run(args, settings)
    except (InvalidPieceKind, OutOfBounds, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    json.dump(report, sys.stdout, indent=2)
    print()
    return 0 if report["stalemate"] else 1


if __name__ == "__main__":
    sys.exit(main())
