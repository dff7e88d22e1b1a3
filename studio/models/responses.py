"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from studio.models.palette import CanvasPreset, Palette


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    phases_registered: int = 0


class PalettesResponse(BaseModel):
    palettes: list[Palette]
    default: str


class CanvasPresetsResponse(BaseModel):
    presets: list[CanvasPreset]


class ComposeResponse(BaseModel):
    seed: int
    mode: str
    width: float
    height: float
    background: str
    shapes: list[dict[str, Any]] = Field(default_factory=list)
    counts: dict[str, int] = Field(default_factory=dict)
    phases: list[str] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class AnimateResponse(BaseModel):
    seed: int
    frames: int
    simulated_ms: float
    trail_alpha: float
    shapes: list[dict[str, Any]] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class TextPathResponse(BaseModel):
    points: list[tuple[float, float]] = Field(default_factory=list)
    letter_bounds: list[dict[str, float]] = Field(default_factory=list)
