"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import HTTPException

from studio.config import settings
from studio.engine.palettes import get_palette
from studio.models.palette import Palette


def get_settings():
    return settings


def resolve_palette(name: str | None) -> Palette:
    """Named palette, or the configured default. Unknown names are a 404."""
    try:
        return get_palette(name or settings.default_palette, strict=True)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
