"""Anchors — 1 to 4 large focal shapes, gridded when structure is high.

Draw sequence per anchor: placement (2 gaussians on the grid, else 2 ranges),
kind pick, palette pick, rotation range (only when chaos > 30), then the
kind geometry (circle: radius range; rectangle: width, height, corner chance).
"""

from __future__ import annotations

import math

from studio.engine.color import vary_color
from studio.engine.config import (
    ANCHOR_BASE_SIZE_FRACTION,
    ANCHOR_GRID_JITTER,
    ANCHOR_GRID_STRUCTURE,
    ANCHOR_MAX_EXTRA,
    ANCHOR_ROTATION_CHAOS,
    ANCHOR_ROTATION_DEG,
)
from studio.engine.context import CompositionContext
from studio.engine.registry import Mode, phase
from studio.engine.shapes import Role, RoleShape, ShapeKind, create_circle, create_rectangle

# Circles twice as likely as rectangles.
_ANCHOR_KINDS = (ShapeKind.CIRCLE, ShapeKind.RECTANGLE, ShapeKind.CIRCLE)


def anchor_count(density: float) -> int:
    return max(1, math.floor(1 + (density / 100) * ANCHOR_MAX_EXTRA))


@phase(
    id="anchors",
    mode=Mode.FREEFORM,
    description="Place the large focal shapes",
)
def anchors(ctx: CompositionContext) -> None:
    controls = ctx.controls
    rng = ctx.rng
    width, height = ctx.width, ctx.height

    count = anchor_count(controls.density)
    size = ctx.min_side * ANCHOR_BASE_SIZE_FRACTION * (0.5 + (controls.scale / 100) * 1.5)

    use_grid = controls.structure > ANCHOR_GRID_STRUCTURE
    grid_size = math.ceil(math.sqrt(count + 2))

    for i in range(count):
        if use_grid:
            col = i % grid_size
            row = i // grid_size
            cell_w = width / grid_size
            cell_h = height / grid_size
            x = cell_w * (col + 0.5)
            y = cell_h * (row + 0.5)

            jitter = (controls.chaos / 100) * cell_w * ANCHOR_GRID_JITTER
            x += rng.gaussian() * jitter
            y += rng.gaussian() * jitter
        else:
            x = rng.range(size, width - size)
            y = rng.range(size, height - size)

        kind = rng.pick(_ANCHOR_KINDS)
        color = vary_color(rng.pick(ctx.palette.anchor), controls.palette_variation, ctx.seed + i)

        rotation = 0.0
        if controls.chaos > ANCHOR_ROTATION_CHAOS:
            rotation = rng.range(-ANCHOR_ROTATION_DEG, ANCHOR_ROTATION_DEG) * (controls.chaos / 100)

        if kind is ShapeKind.CIRCLE:
            shape = create_circle(x, y, size * rng.range(0.6, 1.0), fill=color, rotation=rotation)
        else:
            w = size * rng.range(0.8, 1.5)
            h = size * rng.range(0.8, 1.5)
            shape = create_rectangle(
                x, y, w, h,
                fill=color,
                rotation=rotation,
                corner_radius=size * 0.1 if rng.chance(0.6) else 0.0,
            )

        ctx.anchors.append(RoleShape(shape, Role.ANCHOR))
