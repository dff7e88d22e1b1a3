"""Draw animated shapes onto an SVG surface.

Each shape becomes a group translated to its wobbled position and rotated by
its rotation; the primitive itself is drawn around the origin. Outlines that
are not plain SVG primitives are assembled from svgpathtools segments.
"""

from __future__ import annotations

from typing import Any

from svgpathtools import Arc, Line, Path, QuadraticBezier

from studio.engine.animation import AnimatedShape, glow_blur, render_order
from studio.engine.shapes import Circle, Rectangle, Semicircle, Shape, Triangle
from studio.engine.shapes import Line as LineShape
from studio.svg.serializer import serialize_svg
from studio.utils.geometry import equilateral_vertices

DEFAULT_STROKE = "#ffffff"
DEFAULT_STROKE_WIDTH = 2.0


def _num(value: float) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def semicircle_path(radius: float) -> Path:
    """Lower half disc: arc from (r, 0) through (0, r) to (-r, 0), closed by the diameter."""
    start, end = complex(radius, 0), complex(-radius, 0)
    return Path(
        Arc(start, complex(radius, radius), 0, False, True, end),
        Line(end, start),
    )


def rounded_rect_path(width: float, height: float, corner: float) -> Path:
    """Centred rectangle with quadratic corners of size ``corner``."""
    x, y = -width / 2, -height / 2
    r = corner
    tl, tr = complex(x, y), complex(x + width, y)
    br, bl = complex(x + width, y + height), complex(x, y + height)
    return Path(
        Line(tl + r, tr - r),
        QuadraticBezier(tr - r, tr, tr + r * 1j),
        Line(tr + r * 1j, br - r * 1j),
        QuadraticBezier(br - r * 1j, br, br - r),
        Line(br - r, bl + r),
        QuadraticBezier(bl + r, bl, bl - r * 1j),
        Line(bl - r * 1j, tl + r * 1j),
        QuadraticBezier(tl + r * 1j, tl, tl + r),
    )


def triangle_path(size: float) -> Path:
    a, b, c = (complex(px, py) for px, py in equilateral_vertices(size))
    return Path(Line(a, b), Line(b, c), Line(c, a))


def _primitive(shape: Shape) -> dict[str, Any] | None:
    """Kind-specific element around the origin. None for degenerate sizes."""
    if isinstance(shape, Circle):
        if shape.radius <= 0:
            return None
        return {"tag": "circle", "cx": 0, "cy": 0, "r": _num(shape.radius)}
    if isinstance(shape, Semicircle):
        if shape.radius <= 0:
            return None
        return {"tag": "path", "d": semicircle_path(shape.radius).d() + " Z"}
    if isinstance(shape, Rectangle):
        if shape.width <= 0 or shape.height <= 0:
            return None
        r = shape.corner_radius or 0.0
        if r > 0:
            return {"tag": "path", "d": rounded_rect_path(shape.width, shape.height, r).d() + " Z"}
        return {
            "tag": "rect",
            "x": _num(-shape.width / 2),
            "y": _num(-shape.height / 2),
            "width": _num(shape.width),
            "height": _num(shape.height),
        }
    if isinstance(shape, Triangle):
        if shape.size <= 0:
            return None
        return {"tag": "path", "d": triangle_path(shape.size).d() + " Z"}
    if isinstance(shape, LineShape):
        return {
            "tag": "line",
            "x1": 0,
            "y1": 0,
            "x2": _num(shape.x2 - shape.x),
            "y2": _num(shape.y2 - shape.y),
        }
    raise TypeError(f"Unsupported shape: {type(shape).__name__}")


def _paint(shape: Shape) -> dict[str, Any]:
    if isinstance(shape, LineShape):
        return {
            "fill": "none",
            "stroke": shape.stroke or DEFAULT_STROKE,
            "stroke-width": _num(shape.stroke_width or DEFAULT_STROKE_WIDTH),
            "stroke-linecap": "round",
        }
    paint: dict[str, Any] = {"fill": shape.fill or "none"}
    if shape.stroke:
        paint["stroke"] = shape.stroke
        paint["stroke-width"] = _num(shape.stroke_width or DEFAULT_STROKE_WIDTH)
        paint["stroke-linecap"] = "round"
    return paint


def glow_filter(filter_id: str, color: str, blur: float) -> dict[str, Any]:
    """Drop shadow with no offset; a canvas shadow blur is about twice the std deviation."""
    return {
        "tag": "filter",
        "id": filter_id,
        "x": "-50%",
        "y": "-50%",
        "width": "200%",
        "height": "200%",
        "children": [
            {
                "tag": "feDropShadow",
                "dx": 0,
                "dy": 0,
                "stdDeviation": _num(max(0.0, blur) / 2),
                "flood-color": color,
            }
        ],
    }


def shape_element(a: AnimatedShape, filter_id: str | None = None) -> dict[str, Any] | None:
    primitive = _primitive(a.shape)
    if primitive is None:
        return None
    primitive.update(_paint(a.shape))
    return {
        "tag": "g",
        "transform": (
            f"translate({_num(a.shape.x + a.wobble_x)} {_num(a.shape.y + a.wobble_y)})"
            f" rotate({_num(a.shape.rotation)})"
        ),
        "filter": f"url(#{filter_id})" if filter_id else None,
        "children": [primitive],
    }


def render_frame(
    shapes: list[AnimatedShape],
    width: float,
    height: float,
    background: str,
    title: str = "",
) -> str:
    """One frame as an SVG document, drawn texture first and anchors last."""
    elements: list[dict[str, Any]] = [
        {"tag": "rect", "x": 0, "y": 0, "width": _num(width), "height": _num(height), "fill": background}
    ]
    defs: list[dict[str, Any]] = []

    for a in render_order(shapes):
        filter_id = None
        blur = glow_blur(a)
        if blur is not None:
            filter_id = f"glow-{len(defs)}"
            defs.append(glow_filter(filter_id, a.shape.fill, blur))
        elem = shape_element(a, filter_id)
        if elem is not None:
            elements.append(elem)

    return serialize_svg(elements, _num(width), _num(height), title=title, defs=defs)
