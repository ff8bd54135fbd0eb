"""SVG document aggregation and serialization.

A Document accumulates serialized shape fragments and the union of their
bounding rectangles. Shapes are rendered at append time and are not kept, so
appending is one-way: later changes to a shape do not reach the document.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from simplesvg.domain.geometry import Rect, union_rect
from simplesvg.domain.layout import Layout, translate_rect
from simplesvg.domain.shapes import Shape
from simplesvg.exceptions import DocumentSaveError
from simplesvg.io.writer import write_text
from simplesvg.utils.markup import attribute, elem_end, format_fixed

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
SVG_DOCTYPE = (
    '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
    '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">\n'
)


class Document:
    """An SVG document under construction.

    Example:
        doc = Document("out.svg")
        doc.append(Circle(Point(50, 50), 20, NamedColor.RED))
        doc.save()

    Args:
        file_name: Path used by ``save``
        layout: Canvas layout; only applied when apply_layout is set
        apply_layout: Convert shape geometry and the region to SVG space
            using the layout. Off by default, in which case shapes are
            written in the coordinates they were built with.
    """

    def __init__(
        self,
        file_name: str | Path,
        layout: Layout | None = None,
        apply_layout: bool = False,
    ) -> None:
        self.file_name = Path(file_name)
        self.layout = layout if layout is not None else Layout()
        self.apply_layout = apply_layout
        self._body = ""
        self._region: Rect | None = None
        self._shape_count = 0

    @property
    def region(self) -> Rect:
        """Union of the bounding rectangles of every appended shape.

        Reads as the zero rectangle until something is appended.
        """
        if self._region is None:
            return Rect()
        return self._region.copy()

    @property
    def body(self) -> str:
        """Concatenated fragments of every appended shape."""
        return self._body

    @property
    def shape_count(self) -> int:
        return self._shape_count

    def append(self, shape: Shape) -> "Document":
        """Render a shape into the document and grow the region around it.

        Returns:
            The document, so appends can be chained
        """
        layout = self.layout if self.apply_layout else None
        self._body += shape.serialize(layout)

        bounds = shape.bounding_rect()
        if layout is not None:
            bounds = translate_rect(bounds, layout)

        seen = [bounds] if self._region is None else [self._region, bounds]
        self._region = union_rect(seen)

        self._shape_count += 1
        logger.debug(
            "Appended %s shape, region now %s",
            shape.kind.value,
            self._region,
        )
        return self

    def extend(self, shapes: Iterable[Shape]) -> "Document":
        for shape in shapes:
            self.append(shape)
        return self

    def serialize(self) -> str:
        """Render the complete SVG text.

        Every attribute, including the last one on the root element, is
        followed by a space, so the root tag ends in ``version="1.1" >``.
        """
        region = self.region
        view_box = " ".join(
            format_fixed(v)
            for v in (region.min_pt.x, region.min_pt.y, region.width(), region.height())
        )
        return (
            "<?xml "
            + attribute("version", "1.0")
            + attribute("standalone", "no")
            + "?>\n"
            + SVG_DOCTYPE
            + "<svg "
            + attribute("width", region.width(), "px")
            + attribute("height", region.height(), "px")
            + attribute("xmlns", SVG_NAMESPACE)
            + attribute("viewBox", view_box)
            + attribute("version", "1.1")
            + ">\n"
            + self._body
            + elem_end("svg")
        )

    def __str__(self) -> str:
        return self.serialize()

    def save(self) -> bool:
        """Write the SVG text to ``file_name``.

        Returns:
            True on success, False if the file could not be written or the
            text could not be encoded
        """
        try:
            write_text(self.file_name, self.serialize())
        except DocumentSaveError as e:
            logger.warning("Could not save document: %s", e.reason)
            return False

        logger.info("Saved document with %d shapes to %s", self._shape_count, self.file_name)
        return True
