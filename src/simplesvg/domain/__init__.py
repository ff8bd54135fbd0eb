"""Domain models for simplesvg.

This module contains the value types and shapes that make up an SVG
document:

- Geometry: Point, Dimensions, Rect
- Layout: Origin, Layout and the coordinate translation functions
- Paint: NamedColor, Color, Fill, Stroke, Font
- Shapes: Circle, Ellipse, Rectangle, Line, Polygon, Polyline, Path, Text
"""

from simplesvg.domain.geometry import (
    Dimensions,
    Point,
    Rect,
    max_point,
    min_point,
    require,
    union_rect,
)
from simplesvg.domain.layout import (
    Layout,
    Origin,
    translate_point,
    translate_rect,
    translate_scale,
    translate_x,
    translate_y,
)
from simplesvg.domain.paint import Color, Fill, Font, NamedColor, Stroke
from simplesvg.domain.shapes import (
    SHAPE_TYPES,
    Circle,
    Ellipse,
    Line,
    Path,
    Polygon,
    Polyline,
    Rectangle,
    Shape,
    ShapeKind,
    Text,
)

__all__: list[str] = [
    # Enums
    "NamedColor",
    "Origin",
    "ShapeKind",
    # Geometry
    "Dimensions",
    "Point",
    "Rect",
    "max_point",
    "min_point",
    "require",
    "union_rect",
    # Layout
    "Layout",
    "translate_point",
    "translate_rect",
    "translate_scale",
    "translate_x",
    "translate_y",
    # Paint
    "Color",
    "Fill",
    "Font",
    "Stroke",
    # Shapes
    "SHAPE_TYPES",
    "Circle",
    "Ellipse",
    "Line",
    "Path",
    "Polygon",
    "Polyline",
    "Rectangle",
    "Shape",
    "Text",
]
