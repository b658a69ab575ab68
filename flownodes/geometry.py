"""Points, rectangles and the geometry of a connection curve."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from flownodes.core import PortType
from flownodes.style import connection_style

_DEFAULT_CONTROL_OFFSET = 200.0


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle; width and height may be negative until normalized."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_points(cls, top_left: Point, bottom_right: Point) -> "Rect":
        return cls(top_left.x, top_left.y, bottom_right.x - top_left.x, bottom_right.y - top_left.y)

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def top_left(self) -> Point:
        return Point(self.left, self.top)

    @property
    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    def is_null(self) -> bool:
        return self.width == 0 and self.height == 0

    def normalized(self) -> "Rect":
        """Return the same area with non-negative width and height."""
        x, width = (self.x + self.width, -self.width) if self.width < 0 else (self.x, self.width)
        y, height = (self.y + self.height, -self.height) if self.height < 0 else (self.y, self.height)
        return Rect(x, y, width, height)

    def united(self, other: "Rect") -> "Rect":
        """Return the smallest rectangle holding both; a null rectangle adds nothing."""
        if self.is_null():
            return other
        if other.is_null():
            return self
        a, b = self.normalized(), other.normalized()
        return Rect.from_points(
            Point(min(a.left, b.left), min(a.top, b.top)),
            Point(max(a.right, b.right), max(a.bottom, b.bottom)),
        )

    def contains(self, point: Point) -> bool:
        n = self.normalized()
        return n.left <= point.x <= n.right and n.top <= point.y <= n.bottom


@dataclass
class ConnectionGeometry:
    """End points and hover state of a connection curve."""

    in_point: Point = Point()
    out_point: Point = Point()
    line_width: float = 3.0
    hovered: bool = False

    @property
    def source(self) -> Point:
        return self.out_point

    @property
    def sink(self) -> Point:
        return self.in_point

    def end_point(self, port_type: PortType) -> Point:
        if port_type is PortType.NONE:
            raise ValueError("a connection has no end point for PortType.NONE")
        return self.out_point if port_type is PortType.OUT else self.in_point

    def set_end_point(self, port_type: PortType, point: Point) -> None:
        if port_type is PortType.OUT:
            self.out_point = point
        elif port_type is PortType.IN:
            self.in_point = point

    def move_end_point(self, port_type: PortType, offset: Point) -> None:
        if port_type is PortType.OUT:
            self.out_point = self.out_point + offset
        elif port_type is PortType.IN:
            self.in_point = self.in_point + offset

    def points_c1_c2(self) -> tuple[Point, Point]:
        """Control points of the cubic curve from source to sink."""
        x_distance = self.in_point.x - self.out_point.x
        horizontal = min(_DEFAULT_CONTROL_OFFSET, abs(x_distance))
        vertical = 0.0
        ratio_x = 0.5

        if x_distance <= 0:
            y_distance = self.in_point.y - self.out_point.y + 20
            direction = -1.0 if y_distance < 0 else 1.0
            vertical = min(_DEFAULT_CONTROL_OFFSET, abs(y_distance)) * direction
            ratio_x = 1.0

        horizontal *= ratio_x
        c1 = Point(self.out_point.x + horizontal, self.out_point.y + vertical)
        c2 = Point(self.in_point.x - horizontal, self.in_point.y - vertical)
        return c1, c2

    def bounding_rect(self, point_diameter: Optional[float] = None) -> Rect:
        """Rectangle holding the curve, its control points and the end markers."""
        if point_diameter is None:
            point_diameter = connection_style().point_diameter
        c1, c2 = self.points_c1_c2()
        basic = Rect.from_points(self.out_point, self.in_point).normalized()
        control = Rect.from_points(c1, c2).normalized()
        common = basic.united(control)
        corner = Point(point_diameter, point_diameter)
        return Rect.from_points(common.top_left - corner, common.bottom_right + 2 * corner)