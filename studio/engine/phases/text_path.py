"""Text path — one uniform shape per outline point of the laid-out text.

Draw sequence per point: gaussian x, gaussian y, rotation range.
Every shape is an anchor; text mode has no accent or texture layers.
"""

from __future__ import annotations

import math

from studio.engine.color import vary_color
from studio.engine.config import (
    TEXT_BASE_SIZE_FRACTION,
    TEXT_LINE_LENGTH,
    TEXT_RECTANGLE_SIDE,
    TEXT_ROTATION_JITTER_DEG,
    TEXT_TRIANGLE_SIZE,
)
from studio.engine.context import CompositionContext
from studio.engine.registry import Mode, phase
from studio.engine.shapes import (
    Role,
    RoleShape,
    Shape,
    create_circle,
    create_line,
    create_rectangle,
    create_semicircle,
    create_triangle,
)
from studio.engine.text_paths import PathPoint, get_text_path_points
from studio.models.controls import AnimationMode, PathShape


def shape_at_point(
    x: float,
    y: float,
    size: float,
    path_shape: PathShape,
    color: str,
    rotation: float,
    next_point: PathPoint | None = None,
    flow_angle: float | None = None,
) -> Shape:
    """Build the selected path shape. ``flow_angle`` (degrees) orients directional kinds."""
    if path_shape is PathShape.SEMICIRCLE:
        return create_semicircle(
            x, y, size,
            fill=color,
            rotation=flow_angle if flow_angle is not None else rotation,
        )
    if path_shape is PathShape.TRIANGLE:
        return create_triangle(
            x, y, size * TEXT_TRIANGLE_SIZE,
            fill=color,
            rotation=flow_angle if flow_angle is not None else rotation,
        )
    if path_shape is PathShape.RECTANGLE:
        side = size * TEXT_RECTANGLE_SIDE
        return create_rectangle(x, y, side, side, fill=color, rotation=rotation)
    if path_shape is PathShape.LINE:
        if flow_angle is not None:
            angle = math.radians(flow_angle)
        elif next_point is not None:
            angle = math.atan2(next_point.y - y, next_point.x - x)
        else:
            angle = math.radians(rotation)
        length = size * TEXT_LINE_LENGTH
        return create_line(
            x, y,
            x + math.cos(angle) * length,
            y + math.sin(angle) * length,
            stroke=color,
            stroke_width=max(2.0, size * 0.3),
        )
    return create_circle(x, y, size, fill=color, rotation=rotation)


@phase(
    id="text_path",
    mode=Mode.TEXT,
    description="Place shapes along the outline of the input text",
)
def text_path(ctx: CompositionContext) -> None:
    controls = ctx.controls
    layout = get_text_path_points(ctx.text or "", ctx.width, ctx.height, controls.density)
    points = layout.points
    if not points:
        return

    # scale=0 → 0.1×, scale=100 → 2.1× base size
    size = ctx.min_side * TEXT_BASE_SIZE_FRACTION * (0.1 + (controls.scale / 100) * 2.0)
    chaos_offset = (controls.chaos / 100) * size * 2

    flow_angle = controls.flow_angle if controls.animation_mode is AnimationMode.DRIFT else None
    anchor_colors = ctx.palette.anchor

    for i, point in enumerate(points):
        x = point.x + ctx.rng.gaussian() * chaos_offset
        y = point.y + ctx.rng.gaussian() * chaos_offset
        rotation = ctx.rng.range(-TEXT_ROTATION_JITTER_DEG, TEXT_ROTATION_JITTER_DEG) * (controls.chaos / 100)

        color = vary_color(anchor_colors[i % len(anchor_colors)], controls.palette_variation, ctx.seed + i)
        next_point = points[i + 1] if i < len(points) - 1 else None

        shape = shape_at_point(x, y, size, controls.path_shape, color, rotation, next_point, flow_angle)
        ctx.text_shapes.append(RoleShape(shape, Role.ANCHOR))
