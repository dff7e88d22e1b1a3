"""Shared test fixtures."""

from __future__ import annotations

import pytest

from studio.engine.palettes import get_palette
from studio.models.controls import Controls
from studio.models.palette import Palette


# Slider state used for the reference compositions below
DEFAULT_CONTROLS = Controls(
    structure=50,
    density=60,
    scale=50,
    chaos=30,
    motion=60,
    palette_variation=30,
)

# Structure above the grid threshold, chaos above the rotation threshold
GRID_CONTROLS = DEFAULT_CONTROLS.model_copy(update={"structure": 80, "chaos": 60})

REFERENCE_SEED = 12345
CANVAS = (800, 800)

TINY_PALETTE = Palette(
    name="Tiny",
    background="#000000",
    anchor=["#ff0000"],
    accent=["#00ff00"],
    texture=["#0000ff"],
)


@pytest.fixture
def aurora() -> Palette:
    return get_palette("Aurora")


@pytest.fixture
def controls() -> Controls:
    return DEFAULT_CONTROLS


@pytest.fixture
def tiny_palette() -> Palette:
    return TINY_PALETTE
