"""Text → canvas-space outline points.

The glyph table (``studio/data/glyph_paths.json``) is produced offline by
``scripts/extract_glyph_paths.py``: one ordered outline point sequence per
character, normalized into the unit square with aspect ratio preserved.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

GLYPH_TABLE_PATH = Path(__file__).resolve().parent.parent / "data" / "glyph_paths.json"

# 8% horizontal margin on each side.
_SIDE_MARGIN = 0.08
# Letter cells never exceed 60% of canvas height in width.
_MAX_CELL_HEIGHT_FRACTION = 0.6
_LETTER_ASPECT = 1.2
_LETTER_GAP = 0.1

# One stride step per 15 density points below 100.
_DENSITY_STEP = 15


@dataclass(frozen=True)
class PathPoint:
    x: float
    y: float


@dataclass(frozen=True)
class LetterBounds:
    x: float
    width: float


@dataclass
class TextPath:
    points: list[PathPoint] = field(default_factory=list)
    letter_bounds: list[LetterBounds] = field(default_factory=list)


@lru_cache(maxsize=None)
def load_glyph_table(path: Path = GLYPH_TABLE_PATH) -> dict[str, NDArray[np.float64]]:
    """Load the static glyph table once per process. Values are Nx2 arrays."""
    data = json.loads(path.read_text(encoding="utf-8"))
    table = {
        char: np.array(points, dtype=np.float64).reshape(-1, 2)
        for char, points in data["glyphs"].items()
    }
    logger.debug("Loaded %d glyphs from %s (%s)", len(table), path.name, data.get("font", "?"))
    return table


def density_stride(density: float) -> int:
    """Keep every n-th outline point: density 100 → 1, density 0 → 7."""
    return max(1, math.floor((100 - density) / _DENSITY_STEP) + 1)


def get_text_path_points(
    text: str,
    canvas_width: float,
    canvas_height: float,
    density: float,
) -> TextPath:
    """Lay ``text`` out as one centred row of letter cells and flatten their outlines."""
    upper = text.upper()
    if not upper.strip():
        return TextPath()

    glyphs = load_glyph_table()
    n = len(upper)

    available_width = canvas_width - canvas_width * _SIDE_MARGIN * 2
    letter_width = min(available_width / n, canvas_height * _MAX_CELL_HEIGHT_FRACTION)
    letter_height = letter_width * _LETTER_ASPECT
    spacing = letter_width * _LETTER_GAP
    total_width = n * letter_width + (n - 1) * spacing
    start_x = (canvas_width - total_width) / 2
    start_y = (canvas_height - letter_height) / 2

    stride = density_stride(density)
    result = TextPath()

    for i, char in enumerate(upper):
        letter_x = start_x + i * (letter_width + spacing)
        result.letter_bounds.append(LetterBounds(x=letter_x, width=letter_width))

        outline = glyphs.get(char)
        if outline is None or len(outline) == 0:
            continue

        sampled = outline[::stride]
        xs = letter_x + sampled[:, 0] * letter_width
        ys = start_y + sampled[:, 1] * letter_height
        result.points.extend(PathPoint(float(x), float(y)) for x, y in zip(xs, ys))

    return result
