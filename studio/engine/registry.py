"""Phase registry — every generation phase is a standalone function registered via decorator.

Usage:
    @phase(id="accents", mode=Mode.FREEFORM, dependencies=["anchors"])
    def accents(ctx: CompositionContext) -> None:
        ctx.accents.extend(...)

Dependencies fix the order in which phases consume the shared random
stream, so they are part of the determinism contract, not just data flow.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from studio.engine.context import CompositionContext

logger = logging.getLogger(__name__)


class Mode(enum.Enum):
    TEXT = "text"
    FREEFORM = "freeform"


@dataclass
class PhaseSpec:
    id: str
    mode: Mode
    fn: Callable[["CompositionContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class PhaseRegistry:
    """Registry of generation phases, keyed by ID."""

    def __init__(self) -> None:
        self._phases: dict[str, PhaseSpec] = {}

    def register(self, spec: PhaseSpec) -> None:
        if spec.id in self._phases:
            raise ValueError(f"Duplicate phase ID: {spec.id}")
        self._phases[spec.id] = spec
        logger.debug("Registered phase %s (%s)", spec.id, spec.mode.value)

    def get(self, phase_id: str) -> PhaseSpec:
        return self._phases[phase_id]

    def for_mode(self, mode: Mode) -> list[PhaseSpec]:
        return self.resolve_order({s.id for s in self._phases.values() if s.mode == mode})

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[PhaseSpec]:
        """Topological sort respecting dependencies; ties break by ID. None = all phases."""
        pool = self._phases
        if requested_ids is not None:
            expanded: set[str] = set()
            stack = list(requested_ids)
            while stack:
                pid = stack.pop()
                if pid in expanded:
                    continue
                expanded.add(pid)
                spec = pool.get(pid)
                if spec:
                    stack.extend(spec.dependencies)
            pool = {k: v for k, v in pool.items() if k in expanded}

        # Kahn's algorithm
        in_degree: dict[str, int] = {pid: 0 for pid in pool}
        for pid, spec in pool.items():
            for dep in spec.dependencies:
                if dep in pool:
                    in_degree[pid] += 1

        queue = sorted(pid for pid, d in in_degree.items() if d == 0)
        ordered: list[PhaseSpec] = []

        while queue:
            pid = queue.pop(0)
            ordered.append(pool[pid])
            for other_id, other_spec in pool.items():
                if pid in other_spec.dependencies:
                    in_degree[other_id] -= 1
                    if in_degree[other_id] == 0:
                        queue.append(other_id)
                        queue.sort()

        if len(ordered) != len(pool):
            missing = set(pool.keys()) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {missing}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._phases)


# Module-level singleton
_registry = PhaseRegistry()


def get_registry() -> PhaseRegistry:
    return _registry


def phase(
    *,
    id: str,
    mode: Mode,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a generation phase."""

    def decorator(fn: Callable[["CompositionContext"], None]):
        spec = PhaseSpec(
            id=id,
            mode=mode,
            fn=fn,
            dependencies=dependencies or [],
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
