"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from studio.api import compose, health, palettes, text_path

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(palettes.router)
api_router.include_router(compose.router)
api_router.include_router(text_path.router)
