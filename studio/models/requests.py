"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from studio.models.controls import Controls


class ComposeRequest(BaseModel):
    width: float = Field(default=800, gt=0, description="Canvas width")
    height: float = Field(default=800, gt=0, description="Canvas height")
    controls: Controls = Field(default_factory=Controls)
    palette: str | None = Field(default=None, description="Palette name; server default when omitted")
    seed: int | None = Field(default=None, description="Composition seed; random when omitted")
    text: str | None = Field(default=None, description="Non-blank text switches to text mode")


class AnimateRequest(ComposeRequest):
    frames: int = Field(default=60, ge=0, description="Number of ticks to simulate")
    frame_ms: float = Field(default=16.0, gt=0, description="Elapsed time per tick")


class RenderRequest(AnimateRequest):
    frames: int = Field(default=0, ge=0, description="Ticks to simulate before drawing")
    title: str = ""


class TextPathRequest(BaseModel):
    text: str = Field(..., description="Text to lay out")
    width: float = Field(default=800, gt=0)
    height: float = Field(default=800, gt=0)
    density: float = Field(default=60, ge=0, le=100)
