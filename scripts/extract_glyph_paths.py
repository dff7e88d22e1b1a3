"""Extract outline point sequences for A-Z and 0-9 from a TrueType font.

Writes the static glyph table read by ``studio.engine.text_paths``.

Usage:
    python scripts/extract_glyph_paths.py path/to/font.ttf [output.json]

Needs the ``tools`` extra (fontTools).
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import numpy as np
from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.ttLib import TTFont
from svgpathtools import Line, parse_path

from studio.utils.geometry import interpolate_segment, normalize_points

CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

# Samples per curve segment
CURVE_SAMPLES = 8

# Spacing of interpolated points on straight edges, in units of a 2048-upem font
MIN_POINT_DISTANCE = 50

DEFAULT_OUTPUT = Path(__file__).resolve().parent.parent / "studio" / "data" / "glyph_paths.json"


def outline_points(d: str, spacing: float) -> list[complex]:
    """Flatten an SVG path into points: subpath starts, sampled curves, spaced lines."""
    points: list[complex] = []
    for subpath in parse_path(d).continuous_subpaths():
        if len(subpath) == 0:
            continue
        points.append(subpath.start)
        for seg in subpath:
            if isinstance(seg, Line):
                points.extend(interpolate_segment(seg.start, seg.end, spacing))
            else:
                points.extend(seg.point(i / CURVE_SAMPLES) for i in range(1, CURVE_SAMPLES + 1))
    return points


def extract(font_path: Path) -> dict:
    font = TTFont(str(font_path))
    upem = font["head"].unitsPerEm
    cmap = font.getBestCmap()
    glyph_set = font.getGlyphSet()
    spacing = MIN_POINT_DISTANCE * upem / 2048

    glyphs: dict[str, list[list[float]]] = {}
    for char in CHARS:
        name = cmap.get(ord(char))
        if name is None:
            print(f"  No glyph for {char!r}, skipping")
            continue

        pen = SVGPathPen(glyph_set)
        glyph_set[name].draw(pen)
        raw = outline_points(pen.getCommands(), spacing)

        # Font units are y-up; canvas space is y-down.
        arr = np.array([(p.real, -p.imag) for p in raw], dtype=np.float64).reshape(-1, 2)
        glyphs[char] = np.round(normalize_points(arr), 4).tolist()
        print(f"  {char}: {len(glyphs[char])} points")

    glyphs[" "] = []

    family = font["name"].getDebugName(1) or font_path.stem
    return {
        "font": family,
        "units_per_em": upem,
        "curve_samples": CURVE_SAMPLES,
        "min_point_distance": MIN_POINT_DISTANCE,
        "glyphs": glyphs,
    }


def main() -> None:
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    font_path = Path(sys.argv[1])
    output_path = Path(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_OUTPUT

    print(f"Loading font: {font_path}")
    table = extract(font_path)
    output_path.write_text(json.dumps(table, indent=2), encoding="utf-8")
    print(f"\nSaved: {output_path} ({len(table['glyphs'])} glyphs)")


if __name__ == "__main__":
    main()
