import logging
import random

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response
from pydantic import BaseModel

from stalemate.board import InvalidPieceKind, OutOfBounds, Square
from stalemate.config import Settings
from stalemate.generator import MAX_PIECES, generate_pieces, random_king_square
from stalemate.render import render_svg
from stalemate.report import serialize_result
from stalemate.solver import StalemateResult, calculate_stalemate

logger = logging.getLogger(__name__)

settings = Settings()

app = FastAPI(title="Stalemate Placer")


# --- Request/Response models ---

class StalemateRequest(BaseModel):
    king: str                     # "b7" or "row,col"
    pieces: str | list[str]       # "KQB" or ["K", "Q", "B"]
    presort: bool | None = None   # None = use settings


def _solve(req: StalemateRequest) -> StalemateResult:
    presort = settings.presort if req.presort is None else req.presort
    try:
        king = Square.parse(req.king)
        return calculate_stalemate(king, req.pieces, presort=presort, budget=settings.budget())
    except (InvalidPieceKind, OutOfBounds, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


# --- Endpoints ---

@app.get("/api/health")
async def health():
    return {"status": "ok"}


@app.post("/api/stalemate")
def stalemate(req: StalemateRequest):
    result = _solve(req)
    if not result.is_stalemate:
        logger.warning("No stalemate for king %s with %s", req.king, req.pieces)
    return serialize_result(result)


@app.post("/api/stalemate/svg")
def stalemate_svg(req: StalemateRequest):
    result = _solve(req)
    svg = render_svg(result.board, result.king_square, size=settings.svg_size)
    return Response(content=svg, media_type="image/svg+xml")


@app.get("/api/pieces/random")
async def pieces_random(
    max_pieces: int | None = Query(default=None, ge=2, le=MAX_PIECES),
    seed: int | None = None,
):
    rng = random.Random(seed)
    limit = max_pieces or settings.max_generated_pieces
    king = random_king_square(rng)
    pieces = generate_pieces(limit, rng)
    return {"king": king.name, "pieces": "".join(p.symbol for p in pieces)}
