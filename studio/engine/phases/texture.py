"""Texture — small background dots and dashes, only at density ≥ 40.

Draw sequence per element: x range, y range, palette pick, kind pick, then
circle radius range or line length range plus angle (pick when snapped,
range otherwise). Colors are used raw, without variation.
"""

from __future__ import annotations

import math

from studio.engine.config import (
    TEXTURE_BASE_SIZE_FRACTION,
    TEXTURE_MAX_COUNT,
    TEXTURE_MIN_DENSITY,
    TEXTURE_SNAP_STRUCTURE,
)
from studio.engine.context import CompositionContext
from studio.engine.registry import Mode, phase
from studio.engine.shapes import Role, RoleShape, ShapeKind, create_circle, create_line

_TEXTURE_KINDS = (ShapeKind.CIRCLE, ShapeKind.LINE, ShapeKind.CIRCLE)

# Horizontal, vertical and the two diagonals.
_SNAP_ANGLES = (0.0, math.pi / 2, math.pi / 4, -math.pi / 4)


def texture_count(density: float) -> int:
    if density < TEXTURE_MIN_DENSITY:
        return 0
    return math.floor(((density - TEXTURE_MIN_DENSITY) / 60) * TEXTURE_MAX_COUNT)


@phase(
    id="texture",
    mode=Mode.FREEFORM,
    dependencies=["accents"],
    description="Scatter background texture",
)
def texture(ctx: CompositionContext) -> None:
    controls = ctx.controls
    rng = ctx.rng

    count = texture_count(controls.density)
    if count == 0:
        return

    size = ctx.min_side * TEXTURE_BASE_SIZE_FRACTION * (0.5 + (controls.scale / 100) * 0.5)
    snap = controls.structure > TEXTURE_SNAP_STRUCTURE

    for _ in range(count):
        x = rng.range(0, ctx.width)
        y = rng.range(0, ctx.height)
        color = rng.pick(ctx.palette.texture)
        kind = rng.pick(_TEXTURE_KINDS)

        if kind is ShapeKind.CIRCLE:
            shape = create_circle(x, y, size * rng.range(0.3, 1.0), fill=color)
        else:
            length = size * rng.range(2, 6)
            angle = rng.pick(_SNAP_ANGLES) if snap else rng.range(0, math.pi * 2)
            shape = create_line(
                x, y,
                x + math.cos(angle) * length,
                y + math.sin(angle) * length,
                stroke=color,
                stroke_width=1.0,
            )

        ctx.texture.append(RoleShape(shape, Role.TEXTURE))
