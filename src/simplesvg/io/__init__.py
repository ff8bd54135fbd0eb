"""File I/O layer for simplesvg.

This module handles reading scene descriptions and writing rendered SVG.

Key responsibilities:
- Load and validate JSON scene files
- Convert scene specs to domain shapes
- Write rendered documents to disk

Key classes:
- Scene: Validated scene description
- DocumentWriter: Save rendered SVG text
"""

from simplesvg.io.scene import Scene, load_scene, parse_scene
from simplesvg.io.writer import DocumentWriter, write_text

__all__ = [
    "DocumentWriter",
    "Scene",
    "load_scene",
    "parse_scene",
    "write_text",
]
