"""Engine configuration — generation coefficients and animation tuning."""

from __future__ import annotations

from dataclasses import dataclass

# Canvas dimensions below this are clamped before any placement math.
MIN_CANVAS_SIZE = 1.0

# ── Text mode ──
TEXT_BASE_SIZE_FRACTION = 0.025  # of min(width, height)
TEXT_ROTATION_JITTER_DEG = 30.0
TEXT_LINE_LENGTH = 2.5  # × size
TEXT_TRIANGLE_SIZE = 2.0  # × size
TEXT_RECTANGLE_SIDE = 1.8  # × size

# ── Free-form anchors ──
ANCHOR_BASE_SIZE_FRACTION = 0.15
ANCHOR_MAX_EXTRA = 3  # count runs 1..4
ANCHOR_GRID_STRUCTURE = 50  # structure above this snaps anchors to a grid
ANCHOR_GRID_JITTER = 0.4  # × cell width at chaos=100
ANCHOR_ROTATION_CHAOS = 30  # chaos above this rotates anchors
ANCHOR_ROTATION_DEG = 45.0

# ── Free-form accents ──
ACCENT_BASE_SIZE_FRACTION = 0.06
ACCENT_MAX_COUNT = 15
ACCENT_ORBIT_STRUCTURE = 60  # structure above this orbits accents around anchors
ACCENT_DRIFT_CHAOS = 20  # chaos above this scatters accents
ACCENT_ROTATION_DEG = 30.0
ACCENT_COLOR_SEED_OFFSET = 100

# ── Free-form texture ──
TEXTURE_MIN_DENSITY = 40
TEXTURE_MAX_COUNT = 50
TEXTURE_BASE_SIZE_FRACTION = 0.015
TEXTURE_SNAP_STRUCTURE = 50


@dataclass
class AnimationConfig:
    """Tuning for the frame-driven update loop."""

    # ~16 ms frames behave like unit steps.
    dt_scale: float = 0.06
    nominal_frame_ms: float = 16.0

    # Inset from each canvas edge where shapes reflect.
    boundary_padding: float = 50.0

    pulse_amplitude: float = 0.15
    wobble_y_ratio: float = 1.3

    # Base velocity spread: (rand - 0.5) * velocity_spread
    velocity_spread: float = 3.0

    # Angular velocity multiplier when shapes should hold their orientation.
    reduced_spin: float = 0.3

    # Drift mode: speed along the flow angle and angular spread at chaos=100.
    drift_speed: float = 1.5
    drift_spread_deg: float = 45.0

    # Glow blur for anchors: base +/- swing, modulated by pulse phase.
    glow_base: float = 20.0
    glow_swing: float = 10.0


DEFAULT_ANIMATION_CONFIG = AnimationConfig()
