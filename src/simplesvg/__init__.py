"""simplesvg - A small in-memory SVG document model.

Compose circles, ellipses, rectangles, lines, polygons, polylines, paths and
text with fill, stroke and font attributes, append them to a Document, and
get SVG 1.1 text whose canvas is sized to the content.

Example:
    >>> from simplesvg import Circle, Document, NamedColor, Point
    >>> doc = Document("dot.svg")
    >>> doc.append(Circle(Point(50, 50), 20, NamedColor.RED))
    >>> doc.save()
"""

from simplesvg.core.document import Document
from simplesvg.domain import (
    Circle,
    Color,
    Dimensions,
    Ellipse,
    Fill,
    Font,
    Layout,
    Line,
    NamedColor,
    Origin,
    Path,
    Point,
    Polygon,
    Polyline,
    Rect,
    Rectangle,
    Shape,
    ShapeKind,
    Stroke,
    Text,
)

__version__ = "1.0.0"

__all__ = [
    "Circle",
    "Color",
    "Dimensions",
    "Document",
    "Ellipse",
    "Fill",
    "Font",
    "Layout",
    "Line",
    "NamedColor",
    "Origin",
    "Path",
    "Point",
    "Polygon",
    "Polyline",
    "Rect",
    "Rectangle",
    "Shape",
    "ShapeKind",
    "Stroke",
    "Text",
    "__version__",
]
