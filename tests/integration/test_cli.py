"""End-to-end tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from simplesvg import __version__
from simplesvg.cli.app import app

runner = CliRunner()

SCENE = {
    "layout": {"width": 100, "height": 100, "origin": "top_left"},
    "shapes": [
        {"type": "circle", "center": [50, 50], "diameter": 20, "fill": "red"},
        {"type": "path", "subpaths": [[[0, 0], [10, 0], [10, 10]], [[20, 20]]]},
        {"type": "text", "origin": [10, 90], "content": "hello"},
    ],
}


@pytest.fixture
def scene_file(tmp_path: Path) -> Path:
    path = tmp_path / "drawing.json"
    path.write_text(json.dumps(SCENE), encoding="utf-8")
    return path


class TestRenderCommand:
    """Tests for `simplesvg render`."""

    def test_render_default_output(self, scene_file: Path) -> None:
        result = runner.invoke(app, ["render", str(scene_file)])
        assert result.exit_code == 0, result.output
        assert "Complete" in result.output
        assert "3 shapes" in result.output
        assert "origin top_left" in result.output

        output = scene_file.with_suffix(".svg")
        text = output.read_text(encoding="utf-8")
        assert text.endswith("</svg>\n")
        assert '<circle cx="50" cy="50" r="10" fill="rgb(255,0,0)" />' in text
        assert 'd="M0,0 10,0 10,10 z M20,20 z "' in text
        assert ">hello</text>" in text

    def test_render_output_option_quiet(self, scene_file: Path, tmp_path: Path) -> None:
        target = tmp_path / "out.svg"
        result = runner.invoke(app, ["render", str(scene_file), "-o", str(target), "-q"])
        assert result.exit_code == 0
        assert result.output == ""
        assert target.exists()

    def test_render_stdout(self, scene_file: Path) -> None:
        result = runner.invoke(app, ["render", str(scene_file), "--stdout"])
        assert result.exit_code == 0
        assert result.stdout.startswith('<?xml version="1.0" standalone="no" ?>\n')
        assert not scene_file.with_suffix(".svg").exists()

    def test_render_apply_layout(self, tmp_path: Path) -> None:
        scene = tmp_path / "flip.json"
        scene.write_text(
            json.dumps({"shapes": [{"type": "circle", "center": [50, 20], "diameter": 20}]}),
            encoding="utf-8",
        )
        result = runner.invoke(
            app, ["render", str(scene), "--stdout", "--apply-layout", "--origin", "bottom_left"]
        )
        assert result.exit_code == 0
        assert 'cy="280"' in result.stdout

    def test_missing_scene(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["render", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "Scene file not found" in result.output

    def test_invalid_scene(self, tmp_path: Path) -> None:
        scene = tmp_path / "bad.json"
        scene.write_text('{"shapes": [{"type": "blob"}]}', encoding="utf-8")
        result = runner.invoke(app, ["render", str(scene), "-q"])
        assert result.exit_code == 1
        assert "Invalid scene" in result.output

    def test_verbose_and_quiet_conflict(self, scene_file: Path) -> None:
        result = runner.invoke(app, ["render", str(scene_file), "-v", "-q"])
        assert result.exit_code == 1
        assert "Cannot use --verbose and --quiet together" in result.output

    def test_invalid_scale(self, scene_file: Path) -> None:
        result = runner.invoke(app, ["render", str(scene_file), "--scale", "0"])
        assert result.exit_code == 1
        assert "Invalid scale" in result.output


class TestOtherCommands:
    """Tests for `palette` and `--version`."""

    def test_palette(self) -> None:
        result = runner.invoke(app, ["palette"])
        assert result.exit_code == 0
        assert "orange" in result.output
        assert "rgb(255,165,0)" in result.output

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
