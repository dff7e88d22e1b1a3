"""Generative composition engine."""

from studio.engine.registry import phase, Mode, get_registry
from studio.engine.context import CompositionContext
from studio.engine.generator import Composer, generate_composition
from studio.engine.animation import (
    AnimatedShape,
    add_animation_properties,
    update_animated_shapes,
)

__all__ = [
    "phase",
    "Mode",
    "get_registry",
    "CompositionContext",
    "Composer",
    "generate_composition",
    "AnimatedShape",
    "add_animation_properties",
    "update_animated_shapes",
]
