"""Scene rendering orchestration.

The SceneRenderer drives the full workflow of turning a scene file into an
SVG file:
1. Load and validate the scene
2. Build a Document with the effective layout
3. Append every shape in scene order
4. Write the serialized document
"""

import time
from collections.abc import Callable
from pathlib import Path

from simplesvg.config import LayoutConfig, SimpleSvgSettings
from simplesvg.core.document import Document
from simplesvg.exceptions import SimpleSvgError
from simplesvg.io.scene import Scene, load_scene
from simplesvg.io.writer import DocumentWriter
from simplesvg.utils.logging import RenderLogger, RenderStats, configure_logging


def build_document(
    scene: Scene,
    file_name: Path,
    layout_config: LayoutConfig | None = None,
    apply_layout: bool = False,
    shape_callback: Callable[[int, str], None] | None = None,
) -> Document:
    """Build a Document from a validated scene.

    The scene's own layout wins over layout_config.

    Args:
        scene: Validated scene
        file_name: Path stored on the document for ``save``
        layout_config: Fallback layout when the scene has none
        apply_layout: Translate geometry through the layout
        shape_callback: Optional callback(index, kind) after each append

    Returns:
        Document containing every scene shape
    """
    config = scene.layout or layout_config or LayoutConfig()
    document = Document(file_name, config.to_layout(), apply_layout=apply_layout)

    for idx, shape in enumerate(scene.to_shapes()):
        document.append(shape)
        if shape_callback is not None:
            shape_callback(idx, shape.kind.value)

    return document


class SceneRenderer:
    """Renders scene files to SVG files.

    Example:
        renderer = SceneRenderer(SimpleSvgSettings())
        stats = renderer.render(Path("drawing.json"))
    """

    def __init__(self, config: SimpleSvgSettings) -> None:
        """Initialize renderer with configuration.

        Args:
            config: Settings providing layout, output and logging config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
        )
        self.render_logger = RenderLogger(self.logger)

    def render_text(self, scene_path: Path) -> str:
        """Render a scene file and return the SVG text without writing it."""
        document = self._build(scene_path, DocumentWriter.get_output_path(scene_path))
        return document.serialize()

    def render(
        self,
        scene_path: Path,
        output_path: Path | None = None,
        scene_callback: Callable[[Scene, LayoutConfig], None] | None = None,
    ) -> RenderStats:
        """Render a scene file to an SVG file.

        Args:
            scene_path: Path to the JSON scene
            output_path: Destination (defaults to the scene path with .svg)
            scene_callback: Optional callback(scene, layout) once the scene is
                validated, with the layout that will be used

        Returns:
            RenderStats with shape counts, size and timing

        Raises:
            SceneLoadError: If the scene cannot be read
            SceneFormatError: If the scene is invalid
            DocumentSaveError: If the output cannot be written
        """
        stats = self.render_logger.stats
        stats.start_time = time.time()

        if output_path is None:
            output_path = DocumentWriter.get_output_path(scene_path)

        try:
            document = self._build(scene_path, output_path, scene_callback)
            writer = DocumentWriter(output_path, encoding=self.config.output.encoding)
            size = writer.write(document.serialize())
        except SimpleSvgError as e:
            self.render_logger.log_error(e)
            raise

        self.render_logger.log_document_written(output_path, size)
        stats.end_time = time.time()
        return stats

    def _build(
        self,
        scene_path: Path,
        output_path: Path,
        scene_callback: Callable[[Scene, LayoutConfig], None] | None = None,
    ) -> Document:
        scene = load_scene(scene_path)
        self.render_logger.log_scene_loaded(scene_path, len(scene.shapes))

        layout_config = scene.layout or self.config.layout
        if scene_callback is not None:
            scene_callback(scene, layout_config)

        return build_document(
            scene,
            output_path,
            layout_config=layout_config,
            apply_layout=self.config.output.apply_layout,
            shape_callback=lambda idx, kind: self.render_logger.log_shape_appended(kind, idx),
        )
