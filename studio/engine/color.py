"""Hex color helpers and deterministic per-element color variation.

``vary_color`` hashes its seed with a fixed LCG instead of drawing from the
composition RNG, so varying colors never shifts the shared random stream.
"""

from __future__ import annotations

import math
import re

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{6})([0-9a-fA-F]{2})?$")

# Small-modulus LCG constants (classic Numerical Recipes table).
_HASH_MUL = 9301
_HASH_INC = 49297
_HASH_MOD = 233280

# At variation=100 each channel moves by at most 30% of its value.
_MAX_VARIATION = 0.3


def is_hex_color(value: str) -> bool:
    """True for ``#rrggbb`` or ``#rrggbbaa``."""
    return bool(_HEX_RE.match(value))


def parse_hex(color: str) -> tuple[int, int, int, int | None]:
    """Split ``#rrggbb[aa]`` into integer channels. Alpha is None when absent."""
    match = _HEX_RE.match(color)
    if not match:
        raise ValueError(f"Invalid hex color: {color!r}")
    rgb, alpha = match.group(1), match.group(2)
    return (
        int(rgb[0:2], 16),
        int(rgb[2:4], 16),
        int(rgb[4:6], 16),
        int(alpha, 16) if alpha is not None else None,
    )


def to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def seed_hash(seed: int) -> float:
    """Map a seed into [0, 1) (negative seeds map below zero, as truncated modulo does)."""
    return math.fmod(seed * float(_HASH_MUL) + _HASH_INC, _HASH_MOD) / _HASH_MOD


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def vary_color(base_color: str, variation: float, seed: int) -> str:
    """Scale all three channels by a seed-derived factor within +/-30% at variation=100.

    The result is always ``#rrggbb``. An alpha suffix on ``base_color`` is
    dropped, even at variation=0.
    """
    r, g, b, _ = parse_hex(base_color)
    rnd = seed_hash(seed)

    amount = (variation / 100) * _MAX_VARIATION
    adjust = (rnd - 0.5) * 2 * amount

    channels = (min(255, max(0, _round_half_up(c * (1 + adjust)))) for c in (r, g, b))
    return to_hex(*channels)
