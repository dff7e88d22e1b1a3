"""Composition orchestrator — runs generation phases in dependency order, gated by mode."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time
from collections import Counter
from typing import TYPE_CHECKING

from studio.engine.config import MIN_CANVAS_SIZE
from studio.engine.context import CompositionContext
from studio.engine.registry import PhaseRegistry, get_registry
from studio.engine.rng import create_random_utils
from studio.engine.shapes import ROLE_ORDER, RoleShape

if TYPE_CHECKING:
    from studio.models.controls import Controls
    from studio.models.palette import Palette

logger = logging.getLogger(__name__)

_phases_loaded = False


def _register_phases() -> None:
    """Import every module under ``studio.engine.phases`` so its ``@phase`` runs."""
    global _phases_loaded
    if _phases_loaded:
        return
    package = importlib.import_module("studio.engine.phases")
    for info in sorted(pkgutil.iter_modules(package.__path__), key=lambda m: m.name):
        importlib.import_module(f"studio.engine.phases.{info.name}")
    _phases_loaded = True
    logger.debug("Phase modules loaded: %d phases registered", get_registry().count)


class Composer:
    """Runs the phases registered for the context's mode."""

    def __init__(self, registry: PhaseRegistry | None = None) -> None:
        if registry is None:
            _register_phases()
        self.registry = registry or get_registry()

    def run(self, ctx: CompositionContext) -> CompositionContext:
        start = time.perf_counter()
        ordered = self.registry.for_mode(ctx.mode)

        for spec in ordered:
            t0 = time.perf_counter()
            spec.fn(ctx)
            ctx.completed_phases.append(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.1fms", spec.id, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Composition (%s, seed=%d): %d shapes from %d phases in %.0fms",
            ctx.mode.value,
            ctx.seed,
            len(ctx.shapes),
            len(ordered),
            total,
        )
        return ctx


def build_context(
    width: float,
    height: float,
    controls: "Controls",
    palette: "Palette",
    seed: int,
    text: str | None = None,
) -> CompositionContext:
    if width < MIN_CANVAS_SIZE or height < MIN_CANVAS_SIZE:
        logger.debug("Clamping canvas %sx%s to a minimum side of %s", width, height, MIN_CANVAS_SIZE)
    return CompositionContext(
        width=max(MIN_CANVAS_SIZE, width),
        height=max(MIN_CANVAS_SIZE, height),
        controls=controls,
        palette=palette,
        seed=seed,
        rng=create_random_utils(seed),
        text=text,
    )


def generate_composition(
    width: float,
    height: float,
    controls: "Controls",
    palette: "Palette",
    seed: int,
    text: str | None = None,
) -> list[RoleShape]:
    """Build the role-tagged shape list for one composition.

    Non-blank ``text`` selects text mode; otherwise anchors, accents and
    texture are generated in that order from one seeded stream.
    """
    ctx = build_context(width, height, controls, palette, seed, text)
    Composer().run(ctx)
    return ctx.shapes


def count_roles(shapes: list[RoleShape]) -> dict[str, int]:
    counts = Counter(s.role for s in shapes)
    return {role.value: counts.get(role, 0) for role in reversed(ROLE_ORDER)}
