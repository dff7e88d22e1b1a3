"""Write SVG markup from element dicts."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape, quoteattr


def _write_element(elem: dict[str, Any], lines: list[str], depth: int) -> None:
    indent = "  " * depth
    tag = elem.get("tag", "path")
    attrs = {k: v for k, v in elem.items() if k not in ("tag", "children") and v is not None}
    attr_str = "".join(f" {k}={quoteattr(str(v))}" for k, v in attrs.items())
    children = elem.get("children") or []
    if not children:
        lines.append(f"{indent}<{tag}{attr_str} />")
        return
    lines.append(f"{indent}<{tag}{attr_str}>")
    for child in children:
        _write_element(child, lines, depth + 1)
    lines.append(f"{indent}</{tag}>")


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 800.0,
    canvas_h: float = 800.0,
    title: str = "",
    description: str = "",
    defs: list[dict[str, Any]] | None = None,
) -> str:
    """Generate SVG markup. Elements may nest through a ``children`` list."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {canvas_w} {canvas_h}" width="{canvas_w}" height="{canvas_h}"'
        f' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")
    if description:
        lines.append(f"  <desc>{escape(description)}</desc>")

    if defs:
        lines.append("  <defs>")
        for elem in defs:
            _write_element(elem, lines, 2)
        lines.append("  </defs>")

    for elem in elements:
        _write_element(elem, lines, 1)

    lines.append("</svg>")
    return "\n".join(lines)
