"""Exception hierarchy for simplesvg."""


class SimpleSvgError(Exception):
    """Base exception for all simplesvg errors."""

    pass


class GeometryError(SimpleSvgError):
    """Errors in geometric calculations."""

    pass


class EmptyGeometryError(GeometryError):
    """A value was requested from an empty point collection."""

    def __init__(self, what: str) -> None:
        self.what = what
        super().__init__(f"Cannot compute {what}: no points available")


class ColorError(SimpleSvgError):
    """Color value could not be understood."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unknown color '{value}'")


class DocumentError(SimpleSvgError):
    """Errors related to document output."""

    pass


class DocumentSaveError(DocumentError):
    """Error writing a document to disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save document '{path}': {reason}")


class SceneError(SimpleSvgError):
    """Errors related to scene description files."""

    pass


class SceneLoadError(SceneError):
    """Error reading a scene file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load scene '{path}': {reason}")


class SceneFormatError(SceneError):
    """Scene content does not describe a valid document."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Invalid scene: {details}")
