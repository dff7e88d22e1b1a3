"""Tests for shape primitives and their pulse hooks."""

from studio.engine.shapes import (
    Circle,
    Line,
    Rectangle,
    Role,
    RoleShape,
    ShapeKind,
    create_circle,
    create_line,
    create_rectangle,
    create_semicircle,
    create_triangle,
    role_shape_to_dict,
    shape_to_dict,
)


def test_factories_set_kind():
    assert create_circle(0, 0, 5).kind is ShapeKind.CIRCLE
    assert create_rectangle(0, 0, 2, 3).kind is ShapeKind.RECTANGLE
    assert create_line(0, 0, 1, 1).kind is ShapeKind.LINE
    assert create_semicircle(0, 0, 5).kind is ShapeKind.SEMICIRCLE
    assert create_triangle(0, 0, 5).kind is ShapeKind.TRIANGLE


def test_factory_options():
    c = create_circle(1, 2, 3, fill="#ff0000", rotation=15)
    assert c == Circle(1, 2, 3, fill="#ff0000", rotation=15)
    assert c.stroke is None


def test_pulse_baseline_per_kind():
    assert create_circle(0, 0, 5).pulse_baseline() == (5,)
    assert create_semicircle(0, 0, 4).pulse_baseline() == (4,)
    assert create_rectangle(0, 0, 2, 3).pulse_baseline() == (2, 3)
    assert create_triangle(0, 0, 7).pulse_baseline() == (7,)
    assert create_line(0, 0, 1, 1).pulse_baseline() == ()


def test_apply_pulse_scales_from_baseline():
    r = Rectangle(0, 0, 10, 20)
    base = r.pulse_baseline()
    r.apply_pulse(base, 1.1)
    r.apply_pulse(base, 1.1)
    assert r.width == 11
    assert r.height == 22


def test_line_ignores_pulse():
    line = Line(0, 0, 5, 5)
    line.apply_pulse((), 2.0)
    assert (line.x2, line.y2) == (5, 5)


def test_shape_to_dict_omits_unset_styling():
    data = shape_to_dict(create_rectangle(1, 2, 3, 4, fill="#abcdef", corner_radius=0.0))
    assert data == {
        "kind": "rectangle",
        "x": 1,
        "y": 2,
        "rotation": 0.0,
        "fill": "#abcdef",
        "width": 3,
        "height": 4,
        "corner_radius": 0.0,
    }


def test_role_shape_passthrough():
    rs = RoleShape(create_circle(3, 4, 1), Role.ACCENT)
    assert rs.kind is ShapeKind.CIRCLE
    assert (rs.x, rs.y) == (3, 4)
    assert role_shape_to_dict(rs)["role"] == "accent"


def test_translate_moves_both_line_endpoints():
    line = create_line(0, 0, 3, 4)
    line.translate(10, -2)
    assert (line.x, line.y, line.x2, line.y2) == (10, -2, 13, 2)


def test_translate_circle():
    c = create_circle(1, 1, 2)
    c.translate(1, 1)
    assert (c.x, c.y, c.radius) == (2, 2, 2)
