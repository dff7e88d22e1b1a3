"""Playback — owns one composition and drives its animation from frame timestamps.

Regeneration builds the new shape and motion sets completely before swapping
them in, so a caller never sees a half-updated composition.
"""

from __future__ import annotations

import dataclasses
import enum
import logging
from dataclasses import dataclass

from studio.engine.animation import (
    AnimatedShape,
    add_animation_properties,
    render_order,
    update_animated_shapes,
)
from studio.engine.config import DEFAULT_ANIMATION_CONFIG, MIN_CANVAS_SIZE, AnimationConfig
from studio.engine.generator import generate_composition
from studio.engine.shapes import RoleShape
from studio.models.controls import Controls
from studio.models.palette import Palette

logger = logging.getLogger(__name__)


class PlaybackState(enum.Enum):
    PLAYING = "playing"
    PAUSED = "paused"


@dataclass(frozen=True)
class CompositionParams:
    width: float
    height: float
    controls: Controls
    palette: Palette
    seed: int
    text: str | None = None


class CompositionPlayer:
    """Playing/paused state machine around one animated composition."""

    def __init__(
        self,
        params: CompositionParams,
        config: AnimationConfig = DEFAULT_ANIMATION_CONFIG,
    ) -> None:
        self.config = config
        self.state = PlaybackState.PLAYING
        self._last_timestamp: float | None = None
        self.params = params
        self.shapes: list[RoleShape] = []
        self.animated: list[AnimatedShape] = []
        self._build(params)

    def _build(self, params: CompositionParams) -> None:
        c = params.controls
        shapes = generate_composition(
            params.width, params.height, c, params.palette, params.seed, params.text
        )
        animated = add_animation_properties(
            shapes, c.chaos, c.motion, params.seed, c.animation_mode, c.flow_angle, self.config
        )
        # Swap only once both sets exist.
        self.params, self.shapes, self.animated = params, shapes, animated
        self._last_timestamp = None

    def regenerate(self, **changes) -> None:
        """Rebuild with some parameters replaced, e.g. ``regenerate(seed=7)``."""
        self._build(dataclasses.replace(self.params, **changes))
        logger.debug("Regenerated composition: seed=%d, %d shapes", self.params.seed, len(self.shapes))

    @property
    def is_playing(self) -> bool:
        return self.state is PlaybackState.PLAYING

    def play(self) -> None:
        if not self.is_playing:
            self.state = PlaybackState.PLAYING
            self._last_timestamp = None

    def pause(self) -> None:
        self.state = PlaybackState.PAUSED

    def toggle(self) -> PlaybackState:
        if self.is_playing:
            self.pause()
        else:
            self.play()
        return self.state

    def tick(self, timestamp_ms: float) -> bool:
        """Advance to ``timestamp_ms``. Returns False when paused (nothing moved)."""
        if not self.is_playing:
            return False
        if self._last_timestamp is None:
            delta = self.config.nominal_frame_ms
        else:
            delta = timestamp_ms - self._last_timestamp
        self._last_timestamp = timestamp_ms
        self.step(delta)
        return True

    def step(self, delta_ms: float) -> None:
        """Advance by a fixed frame duration regardless of the wall clock."""
        update_animated_shapes(
            self.animated,
            max(MIN_CANVAS_SIZE, self.params.width),
            max(MIN_CANVAS_SIZE, self.params.height),
            delta_ms,
            self.config,
        )

    def layers(self) -> list[AnimatedShape]:
        return render_order(self.animated)

    def trail_alpha(self) -> float:
        """Opacity of the background wash drawn each frame; lower motion leaves shorter trails."""
        return 0.15 + (1 - self.params.controls.motion / 100) * 0.3
