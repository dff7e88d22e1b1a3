"""Tests for SVG frame rendering."""

import xml.etree.ElementTree as ET

import pytest
from svgpathtools import parse_path

from studio.engine.animation import AnimatedShape, add_animation_properties
from studio.engine.generator import generate_composition
from studio.engine.shapes import (
    Role,
    create_circle,
    create_line,
    create_rectangle,
    create_semicircle,
    create_triangle,
)
from studio.svg.renderer import (
    render_frame,
    rounded_rect_path,
    semicircle_path,
    shape_element,
    triangle_path,
)
from studio.svg.serializer import serialize_svg
from tests.conftest import CANVAS, DEFAULT_CONTROLS

_NS = "{http://www.w3.org/2000/svg}"


def _parse(svg: str) -> ET.Element:
    return ET.fromstring(svg.split("\n", 1)[1])


def test_serializer_nests_children_and_defs():
    svg = serialize_svg(
        [{"tag": "g", "id": "outer", "children": [{"tag": "circle", "r": 2}]}],
        10,
        10,
        title="a < b",
        defs=[{"tag": "filter", "id": "f"}],
    )
    root = _parse(svg)
    assert root.find(f"{_NS}defs/{_NS}filter").get("id") == "f"
    assert root.find(f"{_NS}g/{_NS}circle").get("r") == "2"
    assert root.find(f"{_NS}title").text == "a < b"


def test_serializer_drops_none_attributes():
    svg = serialize_svg([{"tag": "rect", "filter": None, "width": 3}])
    assert "filter" not in svg


def test_semicircle_path_spans_lower_half():
    path = semicircle_path(10)
    assert path.start == complex(10, 0)
    assert path.point(0.25).imag > 0
    xmin, xmax, ymin, ymax = path.bbox()
    assert (xmin, xmax) == pytest.approx((-10, 10))
    assert ymin == pytest.approx(0)
    assert ymax == pytest.approx(10)


def test_rounded_rect_path_bbox():
    xmin, xmax, ymin, ymax = rounded_rect_path(40, 20, 5).bbox()
    assert (xmin, xmax, ymin, ymax) == pytest.approx((-20, 20, -10, 10))


def test_triangle_path_points_up():
    path = triangle_path(10)
    assert path.start == pytest.approx(complex(0, -10 * 3 ** 0.5 / 4))
    assert path.isclosed()


def test_paths_round_trip_through_d():
    d = rounded_rect_path(40, 20, 5).d()
    assert parse_path(d).bbox() == pytest.approx(rounded_rect_path(40, 20, 5).bbox())


def test_shape_element_transform_includes_wobble():
    a = AnimatedShape(create_circle(100, 50, 4, fill="#ff0000", rotation=30), Role.ACCENT, wobble_x=2, wobble_y=-1)
    elem = shape_element(a)
    assert elem["transform"] == "translate(102 49) rotate(30)"
    circle = elem["children"][0]
    assert circle["tag"] == "circle"
    assert circle["fill"] == "#ff0000"
    assert "stroke" not in circle


def test_line_defaults_and_relative_end():
    a = AnimatedShape(create_line(10, 10, 40, 50), Role.TEXTURE)
    line = shape_element(a)["children"][0]
    assert (line["x2"], line["y2"]) == ("30", "40")
    assert line["stroke"] == "#ffffff"
    assert line["stroke-width"] == "2"
    assert line["stroke-linecap"] == "round"


def test_unfilled_stroked_shape():
    a = AnimatedShape(create_rectangle(0, 0, 10, 10, stroke="#00ff00", stroke_width=3), Role.ACCENT)
    rect = shape_element(a)["children"][0]
    assert rect["fill"] == "none"
    assert rect["stroke"] == "#00ff00"
    assert rect["stroke-width"] == "3"


@pytest.mark.parametrize(
    "shape, tag",
    [
        (create_semicircle(0, 0, 5, fill="#fff000"), "path"),
        (create_triangle(0, 0, 5, fill="#fff000"), "path"),
        (create_rectangle(0, 0, 5, 5, fill="#fff000", corner_radius=1), "path"),
        (create_rectangle(0, 0, 5, 5, fill="#fff000"), "rect"),
    ],
)
def test_primitive_tags(shape, tag):
    assert shape_element(AnimatedShape(shape, Role.ACCENT))["children"][0]["tag"] == tag


def test_degenerate_shapes_are_skipped():
    assert shape_element(AnimatedShape(create_circle(0, 0, 0), Role.TEXTURE)) is None


def test_frame_draws_background_then_roles_in_order(aurora):
    shapes = generate_composition(*CANVAS, DEFAULT_CONTROLS.model_copy(update={"density": 100}), aurora, 2)
    animated = add_animation_properties(shapes, 30, 60, 2)
    root = _parse(render_frame(animated, *CANVAS, aurora.background))

    children = [c for c in root if c.tag != f"{_NS}defs"]
    assert children[0].get("fill") == aurora.background
    groups = children[1:]
    assert len(groups) == len(animated)

    # Anchors are last and each filled anchor carries its own glow filter.
    glowing = [g for g in groups if g.get("filter")]
    assert len(glowing) == 4
    assert groups[-4:] == glowing
    filters = root.findall(f"{_NS}defs/{_NS}filter")
    assert len(filters) == 4
    shadow = filters[0].find(f"{_NS}feDropShadow")
    assert shadow.get("flood-color") in {g[0].get("fill") for g in glowing}
