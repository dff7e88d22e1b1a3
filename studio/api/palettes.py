"""GET /api/palettes, /api/canvas-presets — built-in lookup tables."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from studio.config import Settings
from studio.dependencies import get_settings
from studio.engine.palettes import CANVAS_PRESETS, PALETTES
from studio.models.responses import CanvasPresetsResponse, PalettesResponse

router = APIRouter()


@router.get("/palettes", response_model=PalettesResponse)
async def list_palettes(cfg: Settings = Depends(get_settings)) -> PalettesResponse:
    return PalettesResponse(palettes=PALETTES, default=cfg.default_palette)


@router.get("/canvas-presets", response_model=CanvasPresetsResponse)
async def list_canvas_presets() -> CanvasPresetsResponse:
    return CanvasPresetsResponse(presets=CANVAS_PRESETS)
