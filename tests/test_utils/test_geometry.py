"""Tests for geometry helpers and glyph table normalization."""

import numpy as np
import pytest

from studio.engine.text_paths import load_glyph_table
from studio.utils.geometry import bbox, equilateral_vertices, interpolate_segment, normalize_points


def test_normalize_preserves_aspect():
    pts = np.array([[10.0, 20.0], [30.0, 20.0], [30.0, 30.0]])
    out = normalize_points(pts)
    assert bbox(out) == pytest.approx((0, 0, 1, 0.5))


def test_normalize_single_point():
    out = normalize_points(np.array([[5.0, 5.0]]))
    assert out.tolist() == [[0.0, 0.0]]


def test_interpolate_segment_excludes_start():
    pts = interpolate_segment(0j, 10 + 0j, 2.5)
    assert pts == [2.5, 5.0, 7.5, 10.0]


def test_interpolate_short_segment_yields_end():
    assert interpolate_segment(0j, 1j, 50) == [1j]


def test_equilateral_vertices():
    top, left, right = equilateral_vertices(2)
    assert top == pytest.approx((0, -3 ** 0.5 / 2))
    assert left == pytest.approx((-1, 3 ** 0.5 / 2))
    assert right == pytest.approx((1, 3 ** 0.5 / 2))


@pytest.mark.parametrize("char", list("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"))
def test_glyphs_fill_unit_square_on_longer_axis(char):
    xmin, ymin, xmax, ymax = bbox(load_glyph_table()[char])
    assert xmin == pytest.approx(0)
    assert ymin == pytest.approx(0)
    assert max(xmax, ymax) == pytest.approx(1)
    assert min(xmax, ymax) <= 1
