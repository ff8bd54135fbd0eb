"""Core geometric value types.

This module defines the plain geometry used throughout simplesvg:
- Point: A 2D point
- Dimensions: A width/height pair
- Rect: An axis-aligned bounding rectangle that only ever grows
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TypeVar

from simplesvg.exceptions import EmptyGeometryError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable. Shapes replace their points when translated
    instead of mutating them.

    Attributes:
        x: X coordinate in user units
        y: Y coordinate in user units
    """

    x: float = 0.0
    y: float = 0.0

    def offset(self, delta: "Point") -> "Point":
        """Return this point translated by delta."""
        return Point(self.x + delta.x, self.y + delta.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass(frozen=True)
class Dimensions:
    """Width and height of a canvas.

    A single argument sets both fields, so ``Dimensions(100)`` is a
    100 x 100 square.
    """

    width: float = 0.0
    height: float | None = None

    def __post_init__(self) -> None:
        if self.height is None:
            object.__setattr__(self, "height", self.width)


@dataclass
class Rect:
    """Axis-aligned rectangle described by its min and max corners.

    The default ``Rect()`` is the zero rectangle (0,0)-(0,0). It is a seed,
    not an empty sentinel: including anything widens it from the origin.

    Attributes:
        min_pt: Corner with the smallest coordinates
        max_pt: Corner with the largest coordinates
    """

    min_pt: Point = field(default_factory=Point)
    max_pt: Point = field(default_factory=Point)

    @classmethod
    def at(cls, point: Point, width: float = 0.0, height: float = 0.0) -> "Rect":
        """Build the rectangle spanning point .. point + (width, height)."""
        return cls(point, Point(point.x + width, point.y + height))

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> "Rect":
        """Build the tightest rectangle containing every point.

        Raises:
            EmptyGeometryError: If points is empty
        """
        low = require(min_point(points), "minimum point")
        high = require(max_point(points), "maximum point")
        return cls(low, high)

    def width(self) -> float:
        return self.max_pt.x - self.min_pt.x

    def height(self) -> float:
        return self.max_pt.y - self.min_pt.y

    def include(self, item: "Point | Rect") -> None:
        """Widen the rectangle so it also covers a point or another rectangle.

        Including a rectangle is the same as including both of its corners.
        The rectangle never shrinks.
        """
        if isinstance(item, Rect):
            self.include(item.min_pt)
            self.include(item.max_pt)
            return

        self.min_pt = Point(min(self.min_pt.x, item.x), min(self.min_pt.y, item.y))
        self.max_pt = Point(max(self.max_pt.x, item.x), max(self.max_pt.y, item.y))

    def contains(self, point: Point) -> bool:
        """Check if point lies inside or on the border of the rectangle."""
        return (
            self.min_pt.x <= point.x <= self.max_pt.x
            and self.min_pt.y <= point.y <= self.max_pt.y
        )

    def copy(self) -> "Rect":
        return Rect(self.min_pt, self.max_pt)


def min_point(points: Sequence[Point]) -> Point | None:
    """Componentwise minimum of a point sequence.

    Returns:
        Point built from the smallest x and smallest y, or None if empty
    """
    if not points:
        return None
    return Point(min(p.x for p in points), min(p.y for p in points))


def max_point(points: Sequence[Point]) -> Point | None:
    """Componentwise maximum of a point sequence.

    Returns:
        Point built from the largest x and largest y, or None if empty
    """
    if not points:
        return None
    return Point(max(p.x for p in points), max(p.y for p in points))


def require(value: T | None, what: str) -> T:
    """Unwrap an optional result, failing loudly when it is absent.

    Args:
        value: Result of a query that may have produced nothing
        what: Description used in the error message

    Raises:
        EmptyGeometryError: If value is None
    """
    if value is None:
        raise EmptyGeometryError(what)
    return value


def union_rect(rects: Iterable[Rect]) -> Rect | None:
    """Union of several rectangles, or None when there are none.

    The result is seeded from the first rectangle's corners rather than a
    copy of it, so an inverted input (min above max) still yields min <= max.
    """
    result: Rect | None = None
    for rect in rects:
        if result is None:
            result = Rect.at(rect.min_pt)
        result.include(rect)
    return result
