"""Control record — the slider state a composition is derived from."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class PathShape(str, enum.Enum):
    """Shape placed at each text-path point."""

    CIRCLE = "circle"
    SEMICIRCLE = "semicircle"
    TRIANGLE = "triangle"
    RECTANGLE = "rectangle"
    LINE = "line"


class AnimationMode(str, enum.Enum):
    FULL = "full"  # drift, spin, wobble and pulse
    STATIONARY = "stationary"  # wobble and pulse in place
    DRIFT = "drift"  # travel along the flow angle
    PULSE = "pulse"  # size pulse only


class Controls(BaseModel):
    """Immutable 0-100 sliders plus the text-path and animation selectors."""

    model_config = ConfigDict(frozen=True)

    structure: float = Field(default=50, ge=0, le=100)
    density: float = Field(default=60, ge=0, le=100)
    scale: float = Field(default=50, ge=0, le=100)
    chaos: float = Field(default=30, ge=0, le=100)
    motion: float = Field(default=60, ge=0, le=100)
    palette_variation: float = Field(default=30, ge=0, le=100)
    path_shape: PathShape = PathShape.CIRCLE
    animation_mode: AnimationMode = AnimationMode.FULL
    # Degrees; only meaningful in drift mode.
    flow_angle: float = Field(default=0, ge=0, le=360)
