"""CompositionContext — the single state object flowing through all generation phases.

The context owns the one random stream for a pass. Phases append to their
own role list; nothing resets or re-seeds the stream mid-composition.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from studio.engine.registry import Mode
from studio.engine.rng import RandomUtils
from studio.engine.shapes import RoleShape

if TYPE_CHECKING:
    from studio.models.controls import Controls
    from studio.models.palette import Palette


@dataclass
class CompositionContext:
    width: float
    height: float
    controls: "Controls"
    palette: "Palette"
    seed: int
    rng: RandomUtils
    text: str | None = None

    # Per-phase output
    text_shapes: list[RoleShape] = field(default_factory=list)
    anchors: list[RoleShape] = field(default_factory=list)
    accents: list[RoleShape] = field(default_factory=list)
    texture: list[RoleShape] = field(default_factory=list)

    completed_phases: list[str] = field(default_factory=list)

    @property
    def mode(self) -> Mode:
        if self.text is not None and self.text.strip():
            return Mode.TEXT
        return Mode.FREEFORM

    @property
    def min_side(self) -> float:
        return min(self.width, self.height)

    @property
    def shapes(self) -> list[RoleShape]:
        """Concatenated output in generation order (not render order)."""
        if self.mode is Mode.TEXT:
            return list(self.text_shapes)
        return [*self.anchors, *self.accents, *self.texture]
