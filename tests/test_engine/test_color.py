"""Tests for hex parsing and seeded color variation."""

import re

import pytest

from studio.engine.color import is_hex_color, parse_hex, seed_hash, to_hex, vary_color

_HEX6 = re.compile(r"^#[0-9a-f]{6}$")


@pytest.mark.parametrize(
    "base, variation, seed, expected",
    [
        ("#58a6ff", 30, 12345, "#57a3fb"),
        ("#ff6b6b", 100, 7, "#fe6a6a"),
        ("#ffffff", 100, 1, "#d9d9d9"),
        ("#58a6ff", 50, -3, "#4d92e0"),
        ("#000000", 100, 99, "#000000"),
    ],
)
def test_reference_variations(base, variation, seed, expected):
    assert vary_color(base, variation, seed) == expected


@pytest.mark.parametrize("seed", [0, 1, 17, 12345, -40, 999999])
def test_zero_variation_is_identity(seed):
    assert vary_color("#58a6ff", 0, seed) == "#58a6ff"


def test_output_always_valid_hex():
    for seed in range(-50, 200):
        for base in ("#000000", "#ffffff", "#7f00ff", "#123456"):
            assert _HEX6.match(vary_color(base, 100, seed))


def test_alpha_suffix_is_dropped():
    assert vary_color("#1f6feb33", 0, 5) == "#1f6feb"


def test_parse_hex():
    assert parse_hex("#1f6feb33") == (0x1F, 0x6F, 0xEB, 0x33)
    assert parse_hex("#FFFFFF") == (255, 255, 255, None)


@pytest.mark.parametrize("bad", ["", "fff", "#fff", "#12345g", "#1234567"])
def test_invalid_hex(bad):
    assert not is_hex_color(bad)
    with pytest.raises(ValueError):
        parse_hex(bad)


def test_to_hex_pads():
    assert to_hex(0, 10, 255) == "#000aff"


def test_seed_hash_negative_seeds_go_below_zero():
    assert 0 <= seed_hash(5) < 1
    assert seed_hash(-10) < 0
