"""Frame-driven animation: per-shape motion state, integration, and render ordering.

Motion parameters come from a small LCG that is separate from the
composition stream, so animating never changes what was generated. Each
shape draws exactly eight values in every mode; modes only change how the
values are used, so switching modes keeps phases and speeds stable.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass

from studio.engine.config import DEFAULT_ANIMATION_CONFIG, AnimationConfig
from studio.engine.shapes import ROLE_ORDER, ROLE_WEIGHT, Role, RoleShape, Shape, ShapeKind
from studio.models.controls import AnimationMode

_TWO_PI = math.pi * 2


@dataclass
class AnimatedShape:
    """A shape plus its motion state. ``shape`` is owned by this record."""

    shape: Shape
    role: Role
    vx: float = 0.0
    vy: float = 0.0
    v_rotation: float = 0.0
    pulse_phase: float = 0.0
    pulse_speed: float = 0.0
    wobble_phase: float = 0.0
    wobble_speed: float = 0.0
    wobble_amount: float = 0.0
    baseline: tuple[float, ...] = ()

    # Render-time offsets, never folded back into the stored position.
    wobble_x: float = 0.0
    wobble_y: float = 0.0

    @property
    def kind(self) -> ShapeKind:
        return self.shape.kind

    @property
    def x(self) -> float:
        return self.shape.x

    @property
    def y(self) -> float:
        return self.shape.y


class _MotionStream:
    """``s = (s * 9301 + 49297) mod 233280`` with truncated modulo for negative seeds."""

    def __init__(self, seed: int):
        self._s = float(seed)

    def next(self) -> float:
        self._s = math.fmod(self._s * 9301 + 49297, 233280)
        return self._s / 233280


def add_animation_properties(
    shapes: list[RoleShape],
    chaos: float,
    motion: float,
    seed: int,
    animation_mode: AnimationMode = AnimationMode.FULL,
    flow_angle: float = 0.0,
    config: AnimationConfig = DEFAULT_ANIMATION_CONFIG,
) -> list[AnimatedShape]:
    """Derive motion state for each shape. Input shapes are copied, not mutated."""
    stream = _MotionStream(seed)
    chaos_f = chaos / 100
    motion_f = motion / 100
    animated: list[AnimatedShape] = []

    for i, role_shape in enumerate(shapes):
        # Stream position depends on the shape's index, not just its predecessors' draws.
        for _ in range(i):
            stream.next()

        r_vx = stream.next()
        r_vy = stream.next()
        r_rot = stream.next()
        pulse_phase = stream.next() * _TWO_PI
        pulse_speed = (0.02 + stream.next() * 0.04) * motion_f
        wobble_phase = stream.next() * _TWO_PI
        wobble_speed = (0.015 + stream.next() * 0.03) * motion_f
        r_wobble = stream.next()

        role_f = ROLE_WEIGHT[role_shape.role]
        spin = (r_rot - 0.5) * config.velocity_spread * chaos_f * role_f * motion_f

        if animation_mode is AnimationMode.FULL:
            vx = (r_vx - 0.5) * config.velocity_spread * chaos_f * role_f * motion_f
            vy = (r_vy - 0.5) * config.velocity_spread * chaos_f * role_f * motion_f
            wobble = 8 + r_wobble * 15 * chaos_f * motion_f
        elif animation_mode is AnimationMode.STATIONARY:
            vx = vy = 0.0
            spin *= config.reduced_spin
            wobble = 4 + r_wobble * 8 * chaos_f * motion_f
        elif animation_mode is AnimationMode.DRIFT:
            heading = math.radians(flow_angle + (r_vy - 0.5) * 2 * chaos_f * config.drift_spread_deg)
            speed = config.drift_speed * (0.5 + r_vx) * role_f * motion_f
            vx = math.cos(heading) * speed
            vy = math.sin(heading) * speed
            spin *= config.reduced_spin
            wobble = 4 + r_wobble * 8 * chaos_f * motion_f
        else:
            vx = vy = spin = 0.0
            wobble = 0.0

        shape = dataclasses.replace(role_shape.shape)
        animated.append(
            AnimatedShape(
                shape=shape,
                role=role_shape.role,
                vx=vx,
                vy=vy,
                v_rotation=spin,
                pulse_phase=pulse_phase,
                pulse_speed=pulse_speed,
                wobble_phase=wobble_phase,
                wobble_speed=wobble_speed,
                wobble_amount=wobble,
                baseline=shape.pulse_baseline(),
            )
        )

    return animated


def _reflect(pos: float, vel: float, lo: float, hi: float) -> tuple[float, float]:
    """Point the velocity back inside ``[lo, hi]`` and clamp the position."""
    if pos < lo:
        return lo, abs(vel)
    if pos > hi:
        return hi, -abs(vel)
    return pos, vel


def update_animated_shapes(
    shapes: list[AnimatedShape],
    width: float,
    height: float,
    delta_time_ms: float,
    config: AnimationConfig = DEFAULT_ANIMATION_CONFIG,
) -> None:
    """Advance every shape by one frame of ``delta_time_ms``. Mutates in place."""
    dt = delta_time_ms * config.dt_scale
    pad = config.boundary_padding

    for a in shapes:
        s = a.shape
        s.translate(a.vx * dt, a.vy * dt)

        a.wobble_phase += a.wobble_speed * dt
        a.wobble_x = math.sin(a.wobble_phase) * a.wobble_amount
        a.wobble_y = math.cos(a.wobble_phase * config.wobble_y_ratio) * a.wobble_amount

        x, a.vx = _reflect(s.x, a.vx, pad, width - pad)
        y, a.vy = _reflect(s.y, a.vy, pad, height - pad)
        s.translate(x - s.x, y - s.y)

        s.rotation += a.v_rotation * dt

        a.pulse_phase += a.pulse_speed * dt
        if a.baseline:
            s.apply_pulse(a.baseline, 1 + math.sin(a.pulse_phase) * config.pulse_amplitude)


def render_order(shapes: list[AnimatedShape]) -> list[AnimatedShape]:
    """Texture, then accents, then anchors; generation order is kept within a role."""
    return [a for role in ROLE_ORDER for a in shapes if a.role is role]


def glow_blur(a: AnimatedShape, config: AnimationConfig = DEFAULT_ANIMATION_CONFIG) -> float | None:
    """Glow radius for filled anchors, breathing with the pulse. None means no glow."""
    if a.role is not Role.ANCHOR or not a.shape.fill:
        return None
    return config.glow_base + math.sin(a.pulse_phase) * config.glow_swing

