"""POST /api/compose, /api/animate, /api/render — generate, simulate and draw compositions."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from studio.config import Settings
from studio.dependencies import get_settings, resolve_palette
from studio.engine.animation import AnimatedShape
from studio.engine.generator import Composer, build_context, count_roles
from studio.engine.palettes import random_seed
from studio.engine.player import CompositionParams, CompositionPlayer
from studio.engine.shapes import role_shape_to_dict, shape_to_dict
from studio.models.requests import AnimateRequest, ComposeRequest, RenderRequest
from studio.models.responses import AnimateResponse, ComposeResponse
from studio.svg.renderer import render_frame

logger = logging.getLogger(__name__)

router = APIRouter()


def _animated_to_dict(a: AnimatedShape) -> dict:
    data = shape_to_dict(a.shape)
    data.update(
        role=a.role.value,
        vx=a.vx,
        vy=a.vy,
        wobble_x=a.wobble_x,
        wobble_y=a.wobble_y,
        pulse_phase=a.pulse_phase,
    )
    return data


def _simulate(req: AnimateRequest, cfg: Settings) -> tuple[CompositionPlayer, float]:
    if req.frames > cfg.max_animation_frames:
        raise HTTPException(
            status_code=422,
            detail=f"frames must be <= {cfg.max_animation_frames}",
        )
    player = CompositionPlayer(
        CompositionParams(
            width=req.width,
            height=req.height,
            controls=req.controls,
            palette=resolve_palette(req.palette),
            seed=req.seed if req.seed is not None else random_seed(),
            text=req.text,
        )
    )
    for _ in range(req.frames):
        player.step(req.frame_ms)
    return player, req.frames * req.frame_ms


@router.post("/compose", response_model=ComposeResponse)
async def compose(req: ComposeRequest) -> ComposeResponse:
    start = time.perf_counter()
    palette = resolve_palette(req.palette)
    seed = req.seed if req.seed is not None else random_seed()

    ctx = build_context(req.width, req.height, req.controls, palette, seed, req.text)
    Composer().run(ctx)
    shapes = ctx.shapes

    elapsed = (time.perf_counter() - start) * 1000
    return ComposeResponse(
        seed=seed,
        mode=ctx.mode.value,
        width=ctx.width,
        height=ctx.height,
        background=palette.background,
        shapes=[role_shape_to_dict(s) for s in shapes],
        counts=count_roles(shapes),
        phases=list(ctx.completed_phases),
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/animate", response_model=AnimateResponse)
async def animate(req: AnimateRequest, cfg: Settings = Depends(get_settings)) -> AnimateResponse:
    start = time.perf_counter()
    player, simulated = _simulate(req, cfg)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info("Simulated %d frames of %d shapes in %.0fms", req.frames, len(player.animated), elapsed)
    return AnimateResponse(
        seed=player.params.seed,
        frames=req.frames,
        simulated_ms=simulated,
        trail_alpha=player.trail_alpha(),
        shapes=[_animated_to_dict(a) for a in player.layers()],
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/render")
async def render(req: RenderRequest, cfg: Settings = Depends(get_settings)) -> Response:
    player, _ = _simulate(req, cfg)
    params = player.params
    svg = render_frame(
        player.animated,
        max(1.0, params.width),
        max(1.0, params.height),
        params.palette.background,
        title=req.title,
    )
    return Response(
        content=svg,
        media_type="image/svg+xml",
        headers={"X-Composition-Seed": str(params.seed)},
    )
