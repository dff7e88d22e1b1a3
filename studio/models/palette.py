"""Palette and canvas preset models.

Palettes are validated when they are built so the generator never picks from
an empty color list.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from studio.engine.color import is_hex_color


class Palette(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    background: str
    anchor: list[str] = Field(..., min_length=1)
    accent: list[str] = Field(..., min_length=1)
    texture: list[str] = Field(..., min_length=1)

    @field_validator("background")
    @classmethod
    def _check_background(cls, value: str) -> str:
        if not is_hex_color(value):
            raise ValueError(f"Invalid background color: {value!r}")
        return value.lower()

    @field_validator("anchor", "accent", "texture")
    @classmethod
    def _check_colors(cls, values: list[str]) -> list[str]:
        bad = [v for v in values if not is_hex_color(v)]
        if bad:
            raise ValueError(f"Invalid palette colors: {bad}")
        return [v.lower() for v in values]


class CanvasPreset(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    ratio: str = ""
