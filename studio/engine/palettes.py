"""Built-in palettes and canvas presets."""

from __future__ import annotations

import random

from studio.models.palette import CanvasPreset, Palette

PALETTES: list[Palette] = [
    Palette(
        name="Aurora",
        background="#0d1117",
        anchor=["#58a6ff", "#39d353", "#a371f7"],
        accent=["#388bfd", "#2ea043", "#8b5cf6"],
        texture=["#1f6feb33", "#23863533", "#6e40c933"],
    ),
    Palette(
        name="Sunset",
        background="#1a1a2e",
        anchor=["#ff6b6b", "#feca57", "#ff9ff3"],
        accent=["#ee5a5a", "#f8b739", "#f368e0"],
        texture=["#ff6b6b33", "#feca5733", "#ff9ff333"],
    ),
    Palette(
        name="Ocean",
        background="#0c1821",
        anchor=["#00b4d8", "#0077b6", "#90e0ef"],
        accent=["#0096c7", "#005f73", "#48cae4"],
        texture=["#00b4d833", "#0077b633", "#90e0ef33"],
    ),
    Palette(
        name="Forest",
        background="#1b2e1b",
        anchor=["#95d5b2", "#40916c", "#74c69d"],
        accent=["#52b788", "#2d6a4f", "#b7e4c7"],
        texture=["#95d5b233", "#40916c33", "#74c69d33"],
    ),
    Palette(
        name="Mono",
        background="#111111",
        anchor=["#ffffff", "#e0e0e0", "#c0c0c0"],
        accent=["#a0a0a0", "#808080", "#d0d0d0"],
        texture=["#ffffff22", "#e0e0e022", "#c0c0c022"],
    ),
]

CANVAS_PRESETS: list[CanvasPreset] = [
    CanvasPreset(name="Square", width=800, height=800, ratio="1:1"),
    CanvasPreset(name="Landscape", width=1200, height=675, ratio="16:9"),
    CanvasPreset(name="Portrait", width=675, height=1200, ratio="9:16"),
    CanvasPreset(name="Classic", width=1000, height=750, ratio="4:3"),
    CanvasPreset(name="Wide", width=1200, height=500, ratio="12:5"),
]

# Seeds offered by "randomize" stay in a range that is easy to type back in.
MAX_RANDOM_SEED = 1_000_000


def get_palette(name: str, strict: bool = False) -> Palette:
    """Look up a palette by name. Falls back to the first palette unless ``strict``."""
    for palette in PALETTES:
        if palette.name == name:
            return palette
    if strict:
        raise ValueError(f"Unknown palette: {name!r}")
    return PALETTES[0]


def get_canvas_preset(name: str) -> CanvasPreset:
    for preset in CANVAS_PRESETS:
        if preset.name == name:
            return preset
    return CANVAS_PRESETS[0]


def random_seed() -> int:
    return random.randint(0, MAX_RANDOM_SEED - 1)
