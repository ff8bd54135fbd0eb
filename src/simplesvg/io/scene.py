"""Scene description files.

A scene is a JSON document listing shapes and an optional layout. Scenes are
validated with Pydantic and converted to domain shapes, which the renderer
appends to a Document.

Example scene:

    {
        "layout": {"width": 100, "height": 100, "origin": "top_left"},
        "shapes": [
            {"type": "circle", "center": [50, 50], "diameter": 20, "fill": "red"},
            {"type": "path", "subpaths": [[[0, 0], [10, 0], [10, 10]], [[20, 20]]]}
        ]
    }

Colors may be a palette name, "transparent", "#rrggbb" or an [r, g, b] list.
"""

from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from simplesvg.config.settings import LayoutConfig
from simplesvg.domain.geometry import Point
from simplesvg.domain.paint import Color, Fill, Font, Stroke
from simplesvg.domain.shapes import (
    Circle,
    Ellipse,
    Line,
    Path as PathShape,
    Polygon,
    Polyline,
    Rectangle,
    Shape,
    Text,
)
from simplesvg.exceptions import ColorError, SceneFormatError, SceneLoadError

PointSpec = tuple[float, float]
ColorSpec = Union[str, tuple[int, int, int]]


def _point(spec: PointSpec) -> Point:
    return Point(spec[0], spec[1])


def _color(spec: ColorSpec) -> Color:
    if isinstance(spec, str):
        return Color.parse(spec)
    return Color(*spec)


class StrokeSpec(BaseModel):
    """Stroke description. A negative width means no stroke."""

    model_config = ConfigDict(extra="forbid")

    width: float = -1.0
    color: ColorSpec = "transparent"
    non_scaling: bool = False

    def to_stroke(self) -> Stroke:
        return Stroke(self.width, _color(self.color), self.non_scaling)


class FontSpec(BaseModel):
    """Font description for text shapes."""

    model_config = ConfigDict(extra="forbid")

    size: float = 12.0
    family: str = "Verdana"

    def to_font(self) -> Font:
        return Font(self.size, self.family)


class _PaintedSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    fill: ColorSpec = "transparent"
    stroke: StrokeSpec = Field(default_factory=StrokeSpec)

    def _fill(self) -> Fill:
        return Fill(_color(self.fill))


class CircleSpec(_PaintedSpec):
    type: Literal["circle"]
    center: PointSpec
    diameter: float

    def to_shape(self) -> Shape:
        return Circle(_point(self.center), self.diameter, self._fill(), self.stroke.to_stroke())


class EllipseSpec(_PaintedSpec):
    type: Literal["ellipse"]
    center: PointSpec
    width: float
    height: float

    def to_shape(self) -> Shape:
        return Ellipse(
            _point(self.center),
            self.width,
            self.height,
            self._fill(),
            self.stroke.to_stroke(),
        )


class RectangleSpec(_PaintedSpec):
    type: Literal["rectangle"]
    edge: PointSpec
    width: float
    height: float

    def to_shape(self) -> Shape:
        return Rectangle(
            _point(self.edge),
            self.width,
            self.height,
            self._fill(),
            self.stroke.to_stroke(),
        )


class LineSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["line"]
    start: PointSpec
    end: PointSpec
    stroke: StrokeSpec = Field(default_factory=StrokeSpec)

    def to_shape(self) -> Shape:
        return Line(_point(self.start), _point(self.end), self.stroke.to_stroke())


class PolygonSpec(_PaintedSpec):
    type: Literal["polygon"]
    points: list[PointSpec] = Field(default_factory=list)

    def to_shape(self) -> Shape:
        return Polygon([_point(p) for p in self.points], self._fill(), self.stroke.to_stroke())


class PolylineSpec(_PaintedSpec):
    type: Literal["polyline"]
    points: list[PointSpec] = Field(default_factory=list)

    def to_shape(self) -> Shape:
        return Polyline([_point(p) for p in self.points], self._fill(), self.stroke.to_stroke())


class PathSpec(_PaintedSpec):
    type: Literal["path"]
    subpaths: list[list[PointSpec]] = Field(default_factory=list)

    def to_shape(self) -> Shape:
        path = PathShape(self._fill(), self.stroke.to_stroke())
        for subpath in self.subpaths:
            path.start_new_subpath()
            for p in subpath:
                path.add_point(_point(p))
        return path


class TextSpec(_PaintedSpec):
    type: Literal["text"]
    origin: PointSpec
    content: str
    font: FontSpec = Field(default_factory=FontSpec)

    def to_shape(self) -> Shape:
        return Text(
            _point(self.origin),
            self.content,
            self._fill(),
            self.font.to_font(),
            self.stroke.to_stroke(),
        )


ShapeSpec = Annotated[
    Union[
        CircleSpec,
        EllipseSpec,
        RectangleSpec,
        LineSpec,
        PolygonSpec,
        PolylineSpec,
        PathSpec,
        TextSpec,
    ],
    Field(discriminator="type"),
]


class Scene(BaseModel):
    """A validated scene: optional layout plus an ordered list of shapes."""

    model_config = ConfigDict(extra="forbid")

    layout: LayoutConfig | None = None
    shapes: list[ShapeSpec] = Field(default_factory=list)

    def to_shapes(self) -> list[Shape]:
        """Convert every shape spec to a domain shape, preserving order.

        Raises:
            SceneFormatError: If a color cannot be understood
        """
        shapes: list[Shape] = []
        for idx, spec in enumerate(self.shapes):
            try:
                shapes.append(spec.to_shape())
            except ColorError as e:
                raise SceneFormatError(f"shape {idx} ({spec.type}): {e}") from e
        return shapes


def parse_scene(text: str) -> Scene:
    """Validate scene JSON text.

    Raises:
        SceneFormatError: If the text is not valid JSON or not a valid scene
    """
    try:
        return Scene.model_validate_json(text)
    except ValidationError as e:
        raise SceneFormatError(str(e)) from e


def load_scene(path: Path) -> Scene:
    """Read and validate a scene file.

    Raises:
        SceneLoadError: If the file cannot be read
        SceneFormatError: If the content is not a valid scene
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SceneLoadError(str(path), e.strerror or str(e)) from e
    return parse_scene(text)
