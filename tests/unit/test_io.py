"""Unit tests for the I/O layer.

Tests for scene loading, scene conversion and DocumentWriter.
"""

import json
from pathlib import Path

import pytest

from simplesvg.config import OriginName
from simplesvg.domain import (
    Circle,
    Color,
    Line,
    Path as PathShape,
    Point,
    Polygon,
    Rectangle,
    ShapeKind,
    Text,
)
from simplesvg.exceptions import DocumentSaveError, SceneFormatError, SceneLoadError
from simplesvg.io import DocumentWriter, load_scene, parse_scene, write_text


def _scene_text(**scene: object) -> str:
    return json.dumps(scene)


class TestParseScene:
    """Tests for scene validation."""

    def test_empty_scene(self) -> None:
        scene = parse_scene("{}")
        assert scene.layout is None
        assert scene.shapes == []

    def test_layout(self) -> None:
        scene = parse_scene(
            _scene_text(layout={"width": 100, "height": 50, "origin": "top_right", "scale": 2})
        )
        assert scene.layout is not None
        assert scene.layout.origin == OriginName.TOP_RIGHT
        layout = scene.layout.to_layout()
        assert layout.dimensions.width == 100
        assert layout.dimensions.height == 50
        assert layout.scale == 2

    def test_circle(self) -> None:
        scene = parse_scene(
            _scene_text(
                shapes=[
                    {
                        "type": "circle",
                        "center": [50, 50],
                        "diameter": 20,
                        "fill": "red",
                        "stroke": {"width": 1, "color": "black"},
                    }
                ]
            )
        )
        (shape,) = scene.to_shapes()
        assert isinstance(shape, Circle)
        assert shape.center == Point(50, 50)
        assert shape.radius == 10
        assert shape.fill.color == Color(255, 0, 0)
        assert shape.stroke.width == 1

    def test_every_shape_type(self) -> None:
        scene = parse_scene(
            _scene_text(
                shapes=[
                    {"type": "circle", "center": [0, 0], "diameter": 2},
                    {"type": "ellipse", "center": [0, 0], "width": 4, "height": 2},
                    {"type": "rectangle", "edge": [1, 1], "width": 3, "height": 3},
                    {"type": "line", "start": [0, 0], "end": [5, 5]},
                    {"type": "polygon", "points": [[0, 0], [1, 0], [0, 1]]},
                    {"type": "polyline", "points": [[0, 0], [1, 1]]},
                    {"type": "path", "subpaths": [[[0, 0], [1, 0]], [[5, 5]]]},
                    {"type": "text", "origin": [2, 3], "content": "hi"},
                ]
            )
        )
        kinds = [shape.kind for shape in scene.to_shapes()]
        assert kinds == list(ShapeKind)

    def test_path_subpaths(self) -> None:
        scene = parse_scene(
            _scene_text(
                shapes=[
                    {
                        "type": "path",
                        "subpaths": [[[0, 0], [10, 0], [10, 10]], [], [[20, 20]]],
                    }
                ]
            )
        )
        (path,) = scene.to_shapes()
        assert isinstance(path, PathShape)
        assert path.subpaths == [
            [Point(0, 0), Point(10, 0), Point(10, 10)],
            [Point(20, 20)],
        ]

    def test_color_forms(self) -> None:
        scene = parse_scene(
            _scene_text(
                shapes=[
                    {"type": "polygon", "fill": [1, 2, 3]},
                    {"type": "polygon", "fill": "#ff8000"},
                    {"type": "polygon", "fill": "transparent"},
                ]
            )
        )
        fills = [shape.fill.color for shape in scene.to_shapes()]
        assert fills == [Color(1, 2, 3), Color(255, 128, 0), Color.none()]

    def test_text_font(self) -> None:
        scene = parse_scene(
            _scene_text(
                shapes=[
                    {
                        "type": "text",
                        "origin": [1, 2],
                        "content": "x",
                        "font": {"size": 8, "family": "Arial"},
                    }
                ]
            )
        )
        (text,) = scene.to_shapes()
        assert isinstance(text, Text)
        assert text.font.size == 8
        assert text.font.family == "Arial"

    def test_line_rejects_fill(self) -> None:
        """Lines take no fill."""
        with pytest.raises(SceneFormatError):
            parse_scene(
                _scene_text(shapes=[{"type": "line", "start": [0, 0], "end": [1, 1], "fill": "red"}])
            )

    def test_line_stroke(self) -> None:
        scene = parse_scene(
            _scene_text(
                shapes=[
                    {
                        "type": "line",
                        "start": [0, 0],
                        "end": [1, 1],
                        "stroke": {"width": 2, "color": "blue", "non_scaling": True},
                    }
                ]
            )
        )
        (line,) = scene.to_shapes()
        assert isinstance(line, Line)
        assert 'vector-effect="non-scaling-stroke"' in line.serialize()

    def test_unknown_shape_type(self) -> None:
        with pytest.raises(SceneFormatError):
            parse_scene(_scene_text(shapes=[{"type": "star", "center": [0, 0]}]))

    def test_missing_field(self) -> None:
        with pytest.raises(SceneFormatError):
            parse_scene(_scene_text(shapes=[{"type": "circle", "center": [0, 0]}]))

    def test_invalid_json(self) -> None:
        with pytest.raises(SceneFormatError):
            parse_scene("{not json")

    def test_invalid_layout(self) -> None:
        with pytest.raises(SceneFormatError):
            parse_scene(_scene_text(layout={"scale": 0}))

    def test_unknown_color_name(self) -> None:
        scene = parse_scene(
            _scene_text(shapes=[{"type": "circle", "center": [0, 0], "diameter": 2, "fill": "mauve"}])
        )
        with pytest.raises(SceneFormatError, match="shape 0"):
            scene.to_shapes()

    def test_shapes_are_independent(self) -> None:
        scene = parse_scene(_scene_text(shapes=[{"type": "polygon", "points": [[1, 1]]}]))
        first = scene.to_shapes()[0]
        second = scene.to_shapes()[0]
        assert isinstance(first, Polygon)
        first.offset(Point(5, 5))
        assert second.bounding_rect().min_pt == Point(1, 1)


class TestLoadScene:
    """Tests for reading scene files."""

    def test_load(self, tmp_path: Path) -> None:
        scene_path = tmp_path / "scene.json"
        scene_path.write_text(
            _scene_text(shapes=[{"type": "rectangle", "edge": [0, 0], "width": 1, "height": 2}]),
            encoding="utf-8",
        )
        (shape,) = load_scene(scene_path).to_shapes()
        assert isinstance(shape, Rectangle)

    def test_load_nonexistent_file(self, tmp_path: Path) -> None:
        with pytest.raises(SceneLoadError) as exc_info:
            load_scene(tmp_path / "missing.json")
        assert "missing.json" in exc_info.value.path


class TestDocumentWriter:
    """Tests for DocumentWriter and write_text."""

    def test_write_text(self, tmp_path: Path) -> None:
        target = tmp_path / "a.svg"
        size = write_text(target, "<svg/>")
        assert size == 6
        assert target.read_text(encoding="utf-8") == "<svg/>"

    def test_write_text_failure(self, tmp_path: Path) -> None:
        target = tmp_path / "no-such-dir" / "a.svg"
        with pytest.raises(DocumentSaveError) as exc_info:
            write_text(target, "x")
        assert exc_info.value.path == str(target)
        assert not target.exists()

    def test_write_text_unencodable(self, tmp_path: Path) -> None:
        target = tmp_path / "a.svg"
        with pytest.raises(DocumentSaveError) as exc_info:
            write_text(target, "\ud800")
        assert "utf-8" in exc_info.value.reason
        assert not target.exists()

    def test_writer_creates_parent_directories(self, tmp_path: Path) -> None:
        target = tmp_path / "nested" / "dir" / "out.svg"
        writer = DocumentWriter(target)
        assert writer.output_path == target
        assert writer.write("<svg/>") == 6
        assert target.exists()

    def test_writer_encoding(self, tmp_path: Path) -> None:
        target = tmp_path / "out.svg"
        size = DocumentWriter(target, encoding="utf-16").write("é")
        assert size == len("é".encode("utf-16"))

    def test_get_output_path(self) -> None:
        assert DocumentWriter.get_output_path(Path("dir/drawing.json")) == Path("dir/drawing.svg")

