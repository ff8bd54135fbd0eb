"""Document assembly and rendering for simplesvg.

Key classes:
- Document: Accumulates shape fragments and the bounding region, and
  produces the final SVG text
- SceneRenderer: Renders scene files to SVG files

Key functions:
- build_document: Build a Document from a validated scene
"""

from simplesvg.core.document import Document
from simplesvg.core.renderer import SceneRenderer, build_document

__all__ = [
    "Document",
    "SceneRenderer",
    "build_document",
]
