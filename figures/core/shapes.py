"""
Figures Core Shapes Module

Defines the fundamental shape classes: Point, BoundingBox, Color and the
three drawable shape types.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, List, TYPE_CHECKING
from uuid import UUID, uuid4

if TYPE_CHECKING:
    from ..graphics.surface import RenderSurface


@dataclass
class Point:
    """A 2D point in integer canvas coordinates."""
    x: int
    y: int

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)


@dataclass
class BoundingBox:
    """Axis-aligned bounding box, stored as origin plus size."""
    x: int
    y: int
    width: int
    height: int

    @property
    def max_x(self) -> int:
        return self.x + self.width

    @property
    def max_y(self) -> int:
        return self.y + self.height

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class Color:
    """An opaque RGB fill color."""
    r: int
    g: int
    b: int

    GREEN: ClassVar['Color']
    YELLOW: ClassVar['Color']
    RED: ClassVar['Color']
    BLUE: ClassVar['Color']
    GRAY: ClassVar['Color']
    WHITE: ClassVar['Color']

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    def to_hex(self) -> str:
        """Return the color as a #rrggbb string."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


Color.GREEN = Color(0, 255, 0)
Color.YELLOW = Color(255, 255, 0)
Color.RED = Color(255, 0, 0)
Color.BLUE = Color(0, 0, 255)
Color.GRAY = Color(128, 128, 128)
Color.WHITE = Color(255, 255, 255)


def point_on_segment(px: int, py: int, a: Point, b: Point) -> bool:
    """Check if (px, py) lies on the closed segment a-b."""
    cross = (b.x - a.x) * (py - a.y) - (b.y - a.y) * (px - a.x)
    if cross != 0:
        return False
    return (min(a.x, b.x) <= px <= max(a.x, b.x) and
            min(a.y, b.y) <= py <= max(a.y, b.y))


def point_in_polygon(px: int, py: int, polygon: List[Point]) -> bool:
    """
    Check if a point is inside a polygon using ray casting.

    Points exactly on an edge may land on either side; callers that need
    an inclusive boundary test the edges with point_on_segment first.
    """
    n = len(polygon)
    inside = False

    j = n - 1
    for i in range(n):
        if ((polygon[i].y > py) != (polygon[j].y > py) and
            px < (polygon[j].x - polygon[i].x) *
            (py - polygon[i].y) / (polygon[j].y - polygon[i].y) +
            polygon[i].x):
            inside = not inside
        j = i

    return inside


class Shape(ABC):
    """
    Abstract base class for all shapes.

    Every shape must implement:
    - draw(): Issue fill calls on a rendering surface
    - contains(): Check if point is inside/on the shape
    - move(): Translate the shape
    - get_bounding_box(): Return axis-aligned bounding box

    The fill color is fixed at construction.
    """

    def __init__(self, x: int, y: int, color: Color, name: str = ""):
        self.id: UUID = uuid4()
        self.name: str = name or type(self).__name__
        self.x = x
        self.y = y
        self._color = color

    @property
    def color(self) -> Color:
        return self._color

    def get_color(self) -> Color:
        """Return the fill color."""
        return self._color

    def move(self, dx: int, dy: int) -> None:
        """Translate the shape by (dx, dy). No clamping to the canvas."""
        self.x += dx
        self.y += dy

    @abstractmethod
    def draw(self, surface: 'RenderSurface') -> None:
        """Paint the shape onto the surface using its current geometry."""
        pass

    @abstractmethod
    def contains(self, x: int, y: int) -> bool:
        """Check if point is inside/on the shape, boundary included."""
        pass

    @abstractmethod
    def get_bounding_box(self) -> BoundingBox:
        """Return the axis-aligned bounding box."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, x={self.x}, y={self.y})"


class Triangle(Shape):
    """An isosceles triangle given by its apex and height."""

    def __init__(self, x: int, y: int, height: int, color: Color,
                 name: str = ""):
        super().__init__(x, y, color, name)
        self.height = height

    def get_points(self) -> List[Point]:
        """Return the apex followed by the two base corners."""
        half = self.height // 2
        return [
            Point(self.x, self.y),
            Point(self.x + half, self.y + self.height),
            Point(self.x - half, self.y + self.height),
        ]

    def draw(self, surface: 'RenderSurface') -> None:
        surface.fill_polygon(self.get_points(), self._color)

    def contains(self, x: int, y: int) -> bool:
        points = self.get_points()
        for i, a in enumerate(points):
            if point_on_segment(x, y, a, points[i - 1]):
                return True
        return point_in_polygon(x, y, points)

    def get_bounding_box(self) -> BoundingBox:
        return BoundingBox(self.x - self.height // 2, self.y,
                           self.height, self.height)


class Square(Shape):
    """An axis-aligned square given by its top-left corner."""

    def __init__(self, x: int, y: int, side: int, color: Color,
                 name: str = ""):
        super().__init__(x, y, color, name)
        self.side = side

    def draw(self, surface: 'RenderSurface') -> None:
        surface.fill_rect(self.x, self.y, self.side, self.side, self._color)

    def contains(self, x: int, y: int) -> bool:
        return (self.x <= x <= self.x + self.side and
                self.y <= y <= self.y + self.side)

    def get_bounding_box(self) -> BoundingBox:
        return BoundingBox(self.x, self.y, self.side, self.side)


class Circle(Shape):
    """A circle given by its center and radius."""

    def __init__(self, x: int, y: int, radius: int, color: Color,
                 name: str = ""):
        super().__init__(x, y, color, name)
        self.radius = radius

    def draw(self, surface: 'RenderSurface') -> None:
        diameter = 2 * self.radius
        surface.fill_ellipse(self.x - self.radius, self.y - self.radius,
                             diameter, diameter, self._color)

    def contains(self, x: int, y: int) -> bool:
        dx = x - self.x
        dy = y - self.y
        return dx * dx + dy * dy <= self.radius * self.radius

    def get_bounding_box(self) -> BoundingBox:
        return BoundingBox(self.x - self.radius, self.y - self.radius,
                           2 * self.radius, 2 * self.radius)
