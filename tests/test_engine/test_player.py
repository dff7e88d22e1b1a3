"""Tests for the playing/paused state machine."""

import pytest

from studio.engine.player import CompositionParams, CompositionPlayer, PlaybackState
from studio.engine.shapes import Role
from tests.conftest import CANVAS, DEFAULT_CONTROLS


@pytest.fixture
def player(aurora) -> CompositionPlayer:
    return CompositionPlayer(CompositionParams(*CANVAS, DEFAULT_CONTROLS, aurora, seed=31))


def _positions(player):
    return [(a.x, a.y, a.wobble_phase) for a in player.animated]


def test_starts_playing(player):
    assert player.state is PlaybackState.PLAYING
    assert len(player.animated) == len(player.shapes) > 0


def test_first_tick_uses_nominal_frame(player, aurora):
    twin = CompositionPlayer(CompositionParams(*CANVAS, DEFAULT_CONTROLS, aurora, seed=31))
    player.tick(123456.0)
    twin.step(16)
    assert _positions(player) == _positions(twin)


def test_tick_uses_elapsed_time(player, aurora):
    twin = CompositionPlayer(CompositionParams(*CANVAS, DEFAULT_CONTROLS, aurora, seed=31))
    player.tick(1000)
    player.tick(1040)
    twin.step(16)
    twin.step(40)
    assert _positions(player) == _positions(twin)


def test_paused_ticks_are_noops(player):
    player.tick(0)
    player.pause()
    before = _positions(player)
    assert player.tick(500) is False
    assert _positions(player) == before


def test_resume_does_not_jump(player, aurora):
    twin = CompositionPlayer(CompositionParams(*CANVAS, DEFAULT_CONTROLS, aurora, seed=31))
    player.tick(0)
    player.pause()
    player.tick(5000)
    player.play()
    player.tick(100000)
    twin.step(16)
    twin.step(16)
    assert _positions(player) == _positions(twin)


def test_toggle(player):
    assert player.toggle() is PlaybackState.PAUSED
    assert player.toggle() is PlaybackState.PLAYING


def test_regenerate_swaps_everything(player):
    old_shapes = player.shapes
    player.regenerate(seed=32)
    assert player.params.seed == 32
    assert player.shapes is not old_shapes
    assert len(player.animated) == len(player.shapes)
    assert [a.shape for a in player.animated] != [s.shape for s in old_shapes]


def test_regenerate_text_mode(player):
    player.regenerate(text="OK")
    assert all(a.role is Role.ANCHOR for a in player.animated)


def test_layers_in_render_order(player):
    roles = [a.role for a in player.layers()]
    order = [Role.TEXTURE, Role.ACCENT, Role.ANCHOR]
    assert roles == sorted(roles, key=order.index)


@pytest.mark.parametrize("motion, alpha", [(0, 0.45), (50, 0.3), (100, 0.15)])
def test_trail_alpha(player, motion, alpha):
    player.regenerate(controls=DEFAULT_CONTROLS.model_copy(update={"motion": motion}))
    assert player.trail_alpha() == pytest.approx(alpha)
