"""Shape primitives, role tags and factory constructors.

Five closed kinds share position, rotation (degrees) and optional styling.
Each kind also owns its pulse hooks so the animation engine dispatches
through one method per operation instead of switching on a tag.
"""

from __future__ import annotations

import enum
from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar


class ShapeKind(str, enum.Enum):
    CIRCLE = "circle"
    RECTANGLE = "rectangle"
    LINE = "line"
    SEMICIRCLE = "semicircle"
    TRIANGLE = "triangle"


class Role(str, enum.Enum):
    ANCHOR = "anchor"
    ACCENT = "accent"
    TEXTURE = "texture"


# Back-to-front draw order.
ROLE_ORDER: tuple[Role, ...] = (Role.TEXTURE, Role.ACCENT, Role.ANCHOR)

# Animation intensity: anchors drift least, texture most.
ROLE_WEIGHT: dict[Role, float] = {
    Role.ANCHOR: 0.3,
    Role.ACCENT: 0.7,
    Role.TEXTURE: 1.0,
}


@dataclass
class Shape:
    kind: ClassVar[ShapeKind]

    x: float
    y: float
    rotation: float = field(default=0.0, kw_only=True)
    fill: str | None = field(default=None, kw_only=True)
    stroke: str | None = field(default=None, kw_only=True)
    stroke_width: float | None = field(default=None, kw_only=True)

    def pulse_baseline(self) -> tuple[float, ...]:
        """Size fields that pulse. Empty for kinds that do not pulse."""
        return ()

    def apply_pulse(self, baseline: tuple[float, ...], factor: float) -> None:
        """Set size fields to ``baseline * factor``."""

    def translate(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy


@dataclass
class Circle(Shape):
    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE
    radius: float

    def pulse_baseline(self) -> tuple[float, ...]:
        return (self.radius,)

    def apply_pulse(self, baseline: tuple[float, ...], factor: float) -> None:
        self.radius = baseline[0] * factor


@dataclass
class Semicircle(Shape):
    kind: ClassVar[ShapeKind] = ShapeKind.SEMICIRCLE
    radius: float

    def pulse_baseline(self) -> tuple[float, ...]:
        return (self.radius,)

    def apply_pulse(self, baseline: tuple[float, ...], factor: float) -> None:
        self.radius = baseline[0] * factor


@dataclass
class Rectangle(Shape):
    kind: ClassVar[ShapeKind] = ShapeKind.RECTANGLE
    width: float
    height: float
    corner_radius: float | None = field(default=None, kw_only=True)

    def pulse_baseline(self) -> tuple[float, ...]:
        return (self.width, self.height)

    def apply_pulse(self, baseline: tuple[float, ...], factor: float) -> None:
        self.width = baseline[0] * factor
        self.height = baseline[1] * factor


@dataclass
class Line(Shape):
    kind: ClassVar[ShapeKind] = ShapeKind.LINE
    x2: float
    y2: float

    def translate(self, dx: float, dy: float) -> None:
        super().translate(dx, dy)
        self.x2 += dx
        self.y2 += dy


@dataclass
class Triangle(Shape):
    """Equilateral triangle pointing up before rotation; ``size`` is the edge length."""

    kind: ClassVar[ShapeKind] = ShapeKind.TRIANGLE
    size: float

    def pulse_baseline(self) -> tuple[float, ...]:
        return (self.size,)

    def apply_pulse(self, baseline: tuple[float, ...], factor: float) -> None:
        self.size = baseline[0] * factor


@dataclass
class RoleShape:
    shape: Shape
    role: Role

    @property
    def kind(self) -> ShapeKind:
        return self.shape.kind

    @property
    def x(self) -> float:
        return self.shape.x

    @property
    def y(self) -> float:
        return self.shape.y


def create_circle(x: float, y: float, radius: float, **options: Any) -> Circle:
    return Circle(x, y, radius, **options)


def create_rectangle(x: float, y: float, width: float, height: float, **options: Any) -> Rectangle:
    return Rectangle(x, y, width, height, **options)


def create_line(x: float, y: float, x2: float, y2: float, **options: Any) -> Line:
    return Line(x, y, x2, y2, **options)


def create_semicircle(x: float, y: float, radius: float, **options: Any) -> Semicircle:
    return Semicircle(x, y, radius, **options)


def create_triangle(x: float, y: float, size: float, **options: Any) -> Triangle:
    return Triangle(x, y, size, **options)


def shape_to_dict(shape: Shape) -> dict[str, Any]:
    """Serialize a shape with its kind tag; unset optional styling is omitted."""
    data: dict[str, Any] = {"kind": shape.kind.value}
    data.update({k: v for k, v in asdict(shape).items() if v is not None})
    return data


def role_shape_to_dict(role_shape: RoleShape) -> dict[str, Any]:
    data = shape_to_dict(role_shape.shape)
    data["role"] = role_shape.role.value
    return data
