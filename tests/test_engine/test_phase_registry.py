"""Tests for the phase registry."""

import pytest

from studio.engine.context import CompositionContext
from studio.engine.generator import _register_phases
from studio.engine.registry import Mode, PhaseRegistry, PhaseSpec, get_registry


def _noop(ctx: CompositionContext) -> None:
    pass


def test_register_and_get():
    reg = PhaseRegistry()
    spec = PhaseSpec(id="anchors", mode=Mode.FREEFORM, fn=_noop)
    reg.register(spec)
    assert reg.get("anchors") is spec
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = PhaseRegistry()
    reg.register(PhaseSpec(id="a", mode=Mode.TEXT, fn=_noop))
    with pytest.raises(ValueError):
        reg.register(PhaseSpec(id="a", mode=Mode.TEXT, fn=_noop))


def test_resolve_order_with_deps():
    reg = PhaseRegistry()
    reg.register(PhaseSpec(id="z_first", mode=Mode.FREEFORM, fn=_noop))
    reg.register(PhaseSpec(id="a_second", mode=Mode.FREEFORM, fn=_noop, dependencies=["z_first"]))
    ids = [s.id for s in reg.resolve_order({"a_second"})]
    assert ids == ["z_first", "a_second"]


def test_cycle_detected():
    reg = PhaseRegistry()
    reg.register(PhaseSpec(id="a", mode=Mode.FREEFORM, fn=_noop, dependencies=["b"]))
    reg.register(PhaseSpec(id="b", mode=Mode.FREEFORM, fn=_noop, dependencies=["a"]))
    with pytest.raises(ValueError, match="Circular"):
        reg.resolve_order()


def test_for_mode_filters():
    reg = PhaseRegistry()
    reg.register(PhaseSpec(id="t", mode=Mode.TEXT, fn=_noop))
    reg.register(PhaseSpec(id="f", mode=Mode.FREEFORM, fn=_noop))
    assert [s.id for s in reg.for_mode(Mode.TEXT)] == ["t"]


def test_builtin_phase_order():
    _register_phases()
    reg = get_registry()
    assert [s.id for s in reg.for_mode(Mode.FREEFORM)] == ["anchors", "accents", "texture"]
    assert [s.id for s in reg.for_mode(Mode.TEXT)] == ["text_path"]
    assert reg.count == 4


def test_modes_partition_the_registry():
    _register_phases()
    reg = get_registry()
    ids = [s.id for mode in Mode for s in reg.for_mode(mode)]
    assert sorted(ids) == sorted({"anchors", "accents", "texture", "text_path"})
    assert not hasattr(reg, "all")
