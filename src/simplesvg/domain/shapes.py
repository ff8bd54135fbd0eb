"""Drawable shapes.

Every shape implements the same three operations:
- serialize: render the shape as an SVG element fragment
- offset: translate all geometry in place
- bounding_rect: smallest axis-aligned rectangle around the geometry

The set of shapes is closed; ``ShapeKind`` enumerates it.

When ``serialize`` receives a Layout, coordinates are converted with the
layout's origin, scale and offset, and lengths are scaled. Without one the
geometry is written exactly as stored.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from simplesvg.domain.geometry import Point, Rect
from simplesvg.domain.layout import Layout, translate_point, translate_rect, translate_scale
from simplesvg.domain.paint import Fill, Font, Stroke, as_fill
from simplesvg.utils.markup import attribute, elem_end, elem_start, empty_elem_end, point_list


class ShapeKind(str, Enum):
    """Tag identifying each concrete shape type."""

    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    RECTANGLE = "rectangle"
    LINE = "line"
    POLYGON = "polygon"
    POLYLINE = "polyline"
    PATH = "path"
    TEXT = "text"


def _place(point: Point, layout: Layout | None) -> Point:
    return point if layout is None else translate_point(point, layout)


def _length(value: float, layout: Layout | None) -> float:
    return value if layout is None else translate_scale(value, layout)


class Shape(ABC):
    """Interface shared by all shapes.

    Concrete shapes are dataclasses owning a Fill and a Stroke by value plus
    their own geometry. Fills may be given as a Color or NamedColor.
    """

    kind: ClassVar[ShapeKind]
    fill: Fill
    stroke: Stroke

    def __post_init__(self) -> None:
        self.fill = as_fill(self.fill)

    @abstractmethod
    def serialize(self, layout: Layout | None = None) -> str:
        """Render the shape as an SVG element fragment."""

    @abstractmethod
    def offset(self, delta: Point) -> None:
        """Translate every stored point by delta, in place."""

    @abstractmethod
    def bounding_rect(self) -> Rect:
        """Smallest axis-aligned rectangle containing the geometry."""

    def _paint(self) -> str:
        return self.fill.serialize() + self.stroke.serialize()

    def __str__(self) -> str:
        return self.serialize()


@dataclass
class Circle(Shape):
    """Circle given by center and diameter."""

    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE

    center: Point
    diameter: float
    fill: Fill = field(default_factory=Fill)
    stroke: Stroke = field(default_factory=Stroke)

    @property
    def radius(self) -> float:
        return self.diameter / 2

    def serialize(self, layout: Layout | None = None) -> str:
        center = _place(self.center, layout)
        return (
            elem_start("circle")
            + attribute("cx", center.x)
            + attribute("cy", center.y)
            + attribute("r", _length(self.radius, layout))
            + self._paint()
            + empty_elem_end()
        )

    def offset(self, delta: Point) -> None:
        self.center = self.center.offset(delta)

    def bounding_rect(self) -> Rect:
        r = self.radius
        return Rect.at(Point(self.center.x - r, self.center.y - r), r * 2.0, r * 2.0)


@dataclass
class Ellipse(Shape):
    """Axis-aligned ellipse given by center and full width/height."""

    kind: ClassVar[ShapeKind] = ShapeKind.ELLIPSE

    center: Point
    width: float
    height: float
    fill: Fill = field(default_factory=Fill)
    stroke: Stroke = field(default_factory=Stroke)

    @property
    def radius_width(self) -> float:
        return self.width / 2

    @property
    def radius_height(self) -> float:
        return self.height / 2

    def serialize(self, layout: Layout | None = None) -> str:
        center = _place(self.center, layout)
        return (
            elem_start("ellipse")
            + attribute("cx", center.x)
            + attribute("cy", center.y)
            + attribute("rx", _length(self.radius_width, layout))
            + attribute("ry", _length(self.radius_height, layout))
            + self._paint()
            + empty_elem_end()
        )

    def offset(self, delta: Point) -> None:
        self.center = self.center.offset(delta)

    def bounding_rect(self) -> Rect:
        rx, ry = self.radius_width, self.radius_height
        return Rect.at(Point(self.center.x - rx, self.center.y - ry), rx * 2, ry * 2)


@dataclass
class Rectangle(Shape):
    """Rectangle anchored at its edge point."""

    kind: ClassVar[ShapeKind] = ShapeKind.RECTANGLE

    edge: Point
    width: float
    height: float
    fill: Fill = field(default_factory=Fill)
    stroke: Stroke = field(default_factory=Stroke)

    def serialize(self, layout: Layout | None = None) -> str:
        if layout is None:
            x, y, width, height = self.edge.x, self.edge.y, self.width, self.height
        else:
            # A flipped axis moves the anchor to the opposite side.
            placed = translate_rect(self.bounding_rect(), layout)
            x, y = placed.min_pt.x, placed.min_pt.y
            width, height = placed.width(), placed.height()
        return (
            elem_start("rect")
            + attribute("x", x)
            + attribute("y", y)
            + attribute("width", width)
            + attribute("height", height)
            + self._paint()
            + empty_elem_end()
        )

    def offset(self, delta: Point) -> None:
        self.edge = self.edge.offset(delta)

    def bounding_rect(self) -> Rect:
        return Rect.at(self.edge, self.width, self.height)


@dataclass
class Line(Shape):
    """Straight segment. Lines carry no fill; only the stroke is written."""

    kind: ClassVar[ShapeKind] = ShapeKind.LINE

    start: Point
    end: Point
    stroke: Stroke = field(default_factory=Stroke)
    fill: Fill = field(default_factory=Fill, init=False, repr=False)

    def serialize(self, layout: Layout | None = None) -> str:
        start = _place(self.start, layout)
        end = _place(self.end, layout)
        return (
            elem_start("line")
            + attribute("x1", start.x)
            + attribute("y1", start.y)
            + attribute("x2", end.x)
            + attribute("y2", end.y)
            + self.stroke.serialize()
            + empty_elem_end()
        )

    def offset(self, delta: Point) -> None:
        self.start = self.start.offset(delta)
        self.end = self.end.offset(delta)

    def bounding_rect(self) -> Rect:
        rect = Rect.at(self.start)
        rect.include(self.end)
        return rect


@dataclass
class _PointSequence(Shape):
    """Shape made of an ordered list of points."""

    points: list[Point] = field(default_factory=list)
    fill: Fill = field(default_factory=Fill)
    stroke: Stroke = field(default_factory=Stroke)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.points = list(self.points)

    def add_point(self, point: Point) -> "_PointSequence":
        """Append a point; returns self so calls can be chained."""
        self.points.append(point)
        return self

    def serialize(self, layout: Layout | None = None) -> str:
        points = [_place(p, layout) for p in self.points]
        return (
            elem_start(self.kind.value)
            + f'points="{point_list(points)}" '
            + self._paint()
            + empty_elem_end()
        )

    def offset(self, delta: Point) -> None:
        self.points = [p.offset(delta) for p in self.points]

    def bounding_rect(self) -> Rect:
        if not self.points:
            return Rect()
        return Rect.from_points(self.points)


@dataclass
class Polygon(_PointSequence):
    """Closed shape through its points."""

    kind: ClassVar[ShapeKind] = ShapeKind.POLYGON


@dataclass
class Polyline(_PointSequence):
    """Open run of connected segments through its points."""

    kind: ClassVar[ShapeKind] = ShapeKind.POLYLINE


@dataclass
class Path(Shape):
    """Shape made of one or more closed sub-paths.

    A fresh path starts with one empty sub-path. Points are pushed onto the
    last sub-path; ``start_new_subpath`` opens another one unless the last
    is still empty. Paths always use the even-odd fill rule, so nested
    sub-paths cut holes.
    """

    kind: ClassVar[ShapeKind] = ShapeKind.PATH

    fill: Fill = field(default_factory=Fill)
    stroke: Stroke = field(default_factory=Stroke)
    subpaths: list[list[Point]] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.start_new_subpath()

    def add_point(self, point: Point) -> "Path":
        """Append a point to the current sub-path; returns self."""
        self.subpaths[-1].append(point)
        return self

    def start_new_subpath(self) -> None:
        if not self.subpaths or self.subpaths[-1]:
            self.subpaths.append([])

    @property
    def points(self) -> list[Point]:
        """All points of all sub-paths, in order."""
        return [p for subpath in self.subpaths for p in subpath]

    def serialize(self, layout: Layout | None = None) -> str:
        commands = ""
        for subpath in self.subpaths:
            if not subpath:
                continue
            placed = [_place(p, layout) for p in subpath]
            commands += f"M{point_list(placed)}z "

        return (
            elem_start("path")
            + f'd="{commands}" '
            + 'fill-rule="evenodd" '
            + self._paint()
            + empty_elem_end()
        )

    def offset(self, delta: Point) -> None:
        self.subpaths = [[p.offset(delta) for p in subpath] for subpath in self.subpaths]

    def bounding_rect(self) -> Rect:
        points = self.points
        if not points:
            return Rect()
        return Rect.from_points(points)


@dataclass
class Text(Shape):
    """Text anchored at its origin.

    Text extent is not measured, so the bounding rectangle is the zero-area
    rectangle at the origin. Content is written without escaping.
    """

    kind: ClassVar[ShapeKind] = ShapeKind.TEXT

    origin: Point
    content: str
    fill: Fill = field(default_factory=Fill)
    font: Font = field(default_factory=Font)
    stroke: Stroke = field(default_factory=Stroke)

    def serialize(self, layout: Layout | None = None) -> str:
        origin = _place(self.origin, layout)
        return (
            elem_start("text")
            + attribute("x", origin.x)
            + attribute("y", origin.y)
            + self._paint()
            + self.font.serialize()
            + ">"
            + self.content
            + elem_end("text")
        )

    def offset(self, delta: Point) -> None:
        self.origin = self.origin.offset(delta)

    def bounding_rect(self) -> Rect:
        return Rect.at(self.origin)


SHAPE_TYPES: dict[ShapeKind, type[Shape]] = {
    ShapeKind.CIRCLE: Circle,
    ShapeKind.ELLIPSE: Ellipse,
    ShapeKind.RECTANGLE: Rectangle,
    ShapeKind.LINE: Line,
    ShapeKind.POLYGON: Polygon,
    ShapeKind.POLYLINE: Polyline,
    ShapeKind.PATH: Path,
    ShapeKind.TEXT: Text,
}
