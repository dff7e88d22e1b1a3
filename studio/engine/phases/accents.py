"""Accents — up to 15 mid-size shapes, orbiting anchors when structure is high.

Draw sequence per accent: placement (anchor pick, angle, distance when
orbiting; else 2 ranges), chaos drift (2 gaussians, only when chaos > 20),
palette pick, rotation range, kind pick, then the kind geometry.

Fill and stroke are independent coin flips, so an accent may end up with
neither.
"""

from __future__ import annotations

import math

from studio.engine.color import vary_color
from studio.engine.config import (
    ACCENT_BASE_SIZE_FRACTION,
    ACCENT_COLOR_SEED_OFFSET,
    ACCENT_DRIFT_CHAOS,
    ACCENT_MAX_COUNT,
    ACCENT_ORBIT_STRUCTURE,
    ACCENT_ROTATION_DEG,
)
from studio.engine.context import CompositionContext
from studio.engine.registry import Mode, phase
from studio.engine.shapes import (
    Role,
    RoleShape,
    ShapeKind,
    create_circle,
    create_line,
    create_rectangle,
)

_ACCENT_KINDS = (ShapeKind.CIRCLE, ShapeKind.RECTANGLE, ShapeKind.LINE)


def accent_count(density: float) -> int:
    return math.floor((density / 100) * ACCENT_MAX_COUNT)


@phase(
    id="accents",
    mode=Mode.FREEFORM,
    dependencies=["anchors"],
    description="Place mid-size accents around the anchors",
)
def accents(ctx: CompositionContext) -> None:
    controls = ctx.controls
    rng = ctx.rng
    width, height = ctx.width, ctx.height
    chaos = controls.chaos / 100

    count = accent_count(controls.density)
    size = ctx.min_side * ACCENT_BASE_SIZE_FRACTION * (0.5 + (controls.scale / 100) * 1.0)
    orbit = controls.structure > ACCENT_ORBIT_STRUCTURE and len(ctx.anchors) > 0

    for i in range(count):
        if orbit:
            anchor = rng.pick(ctx.anchors)
            angle = rng.range(0, math.pi * 2)
            distance = size * rng.range(2, 5)
            x = anchor.x + math.cos(angle) * distance
            y = anchor.y + math.sin(angle) * distance
        else:
            x = rng.range(size, width - size)
            y = rng.range(size, height - size)

        if controls.chaos > ACCENT_DRIFT_CHAOS:
            drift = size * chaos * 2
            x += rng.gaussian() * drift
            y += rng.gaussian() * drift

        color = vary_color(
            rng.pick(ctx.palette.accent),
            controls.palette_variation,
            ctx.seed + i + ACCENT_COLOR_SEED_OFFSET,
        )
        rotation = rng.range(-ACCENT_ROTATION_DEG, ACCENT_ROTATION_DEG) * chaos
        kind = rng.pick(_ACCENT_KINDS)

        if kind is ShapeKind.CIRCLE:
            radius = size * rng.range(0.4, 0.8)
            shape = create_circle(
                x, y, radius,
                fill=color if rng.chance(0.7) else None,
                stroke=color if rng.chance(0.5) else None,
                stroke_width=2.0,
                rotation=rotation,
            )
        elif kind is ShapeKind.RECTANGLE:
            w = size * rng.range(0.5, 1.5)
            h = size * rng.range(0.5, 1.5)
            shape = create_rectangle(
                x, y, w, h,
                fill=color if rng.chance(0.6) else None,
                stroke=color if rng.chance(0.4) else None,
                stroke_width=2.0,
                rotation=rotation,
                corner_radius=size * 0.15 if rng.chance(0.5) else 0.0,
            )
        else:
            length = size * rng.range(1, 3)
            angle = rng.range(0, math.pi * 2)
            shape = create_line(
                x, y,
                x + math.cos(angle) * length,
                y + math.sin(angle) * length,
                stroke=color,
                stroke_width=rng.range(1, 3),
            )

        ctx.accents.append(RoleShape(shape, Role.ACCENT))
