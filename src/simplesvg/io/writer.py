"""Writing rendered SVG text to disk.

This module provides the DocumentWriter class and the ``write_text`` helper
used by ``Document.save``.
"""

from pathlib import Path

from simplesvg.exceptions import DocumentSaveError


def write_text(path: Path, text: str, encoding: str = "utf-8") -> int:
    """Write text to path in one buffered write.

    Args:
        path: Destination file
        text: Content to write
        encoding: Text encoding

    Returns:
        Number of bytes written

    Raises:
        DocumentSaveError: If the text cannot be encoded or the file cannot
            be opened or written
    """
    try:
        data = text.encode(encoding)
    except UnicodeError as e:
        raise DocumentSaveError(str(path), f"cannot encode as {encoding}: {e}") from e
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise DocumentSaveError(str(path), e.strerror or str(e)) from e
    return len(data)


class DocumentWriter:
    """Writes rendered documents with the configured encoding.

    Example:
        writer = DocumentWriter(Path("drawing.svg"))
        writer.write(document.serialize())
    """

    def __init__(self, output_path: Path, encoding: str = "utf-8") -> None:
        """Initialize the writer.

        Args:
            output_path: Path where the SVG will be saved
            encoding: Text encoding of the output file
        """
        self._output_path = output_path
        self._encoding = encoding

    @property
    def output_path(self) -> Path:
        return self._output_path

    def write(self, text: str) -> int:
        """Write the SVG text, creating missing parent directories.

        Returns:
            Number of bytes written

        Raises:
            DocumentSaveError: If the file cannot be written
        """
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DocumentSaveError(str(self._output_path), e.strerror or str(e)) from e
        return write_text(self._output_path, text, self._encoding)

    @staticmethod
    def get_output_path(scene_path: Path) -> Path:
        """Generate the default output path for a scene file.

        Converts: drawing.json -> drawing.svg
        """
        return scene_path.with_suffix(".svg")
