"""POST /api/text-path — outline points for a line of text."""

from __future__ import annotations

from fastapi import APIRouter

from studio.engine.text_paths import get_text_path_points
from studio.models.requests import TextPathRequest
from studio.models.responses import TextPathResponse

router = APIRouter()


@router.post("/text-path", response_model=TextPathResponse)
async def text_path(req: TextPathRequest) -> TextPathResponse:
    layout = get_text_path_points(req.text, req.width, req.height, req.density)
    return TextPathResponse(
        points=[(p.x, p.y) for p in layout.points],
        letter_bounds=[{"x": b.x, "width": b.width} for b in layout.letter_bounds],
    )
