"""Paint attributes: colors, fills, strokes and fonts.

Each attribute type knows how to render itself as a fragment of SVG
attribute text via ``serialize()``.
"""

from dataclasses import dataclass, field
from enum import Enum

from simplesvg.exceptions import ColorError
from simplesvg.utils.markup import attribute


class NamedColor(Enum):
    """Fixed color palette.

    TRANSPARENT maps to the SVG keyword ``transparent``; every other entry
    maps to an RGB triple.
    """

    TRANSPARENT = -1
    AQUA = 0
    BLACK = 1
    BLUE = 2
    BROWN = 3
    CYAN = 4
    FUCHSIA = 5
    GREEN = 6
    LIME = 7
    MAGENTA = 8
    ORANGE = 9
    PURPLE = 10
    RED = 11
    SILVER = 12
    WHITE = 13
    YELLOW = 14


PALETTE: dict[NamedColor, tuple[int, int, int]] = {
    NamedColor.AQUA: (0, 255, 255),
    NamedColor.BLACK: (0, 0, 0),
    NamedColor.BLUE: (0, 0, 255),
    NamedColor.BROWN: (165, 42, 42),
    NamedColor.CYAN: (0, 255, 255),
    NamedColor.FUCHSIA: (255, 0, 255),
    NamedColor.GREEN: (0, 128, 0),
    NamedColor.LIME: (0, 255, 0),
    NamedColor.MAGENTA: (255, 0, 255),
    NamedColor.ORANGE: (255, 165, 0),
    NamedColor.PURPLE: (128, 0, 128),
    NamedColor.RED: (255, 0, 0),
    NamedColor.SILVER: (192, 192, 192),
    NamedColor.WHITE: (255, 255, 255),
    NamedColor.YELLOW: (255, 255, 0),
}


@dataclass(frozen=True)
class Color:
    """An RGB color or the transparent color.

    Channel values are not range checked.

    Attributes:
        red: Red channel (0-255)
        green: Green channel (0-255)
        blue: Blue channel (0-255)
        transparent: If True the channels are ignored
    """

    red: int = 0
    green: int = 0
    blue: int = 0
    transparent: bool = False

    @classmethod
    def named(cls, color: NamedColor) -> "Color":
        """Build a color from the palette.

        TRANSPARENT, and anything that is not a palette entry, gives the
        transparent color.
        """
        rgb = PALETTE.get(color)
        if rgb is None:
            return cls(transparent=True)
        return cls(*rgb)

    @classmethod
    def none(cls) -> "Color":
        """The transparent color."""
        return cls(transparent=True)

    @classmethod
    def parse(cls, value: str) -> "Color":
        """Parse a palette name, ``transparent`` or ``#rrggbb``.

        Raises:
            ColorError: If the text is not a known color
        """
        text = value.strip()
        if text.startswith("#") and len(text) == 7:
            try:
                return cls(int(text[1:3], 16), int(text[3:5], 16), int(text[5:7], 16))
            except ValueError as e:
                raise ColorError(value) from e

        try:
            return cls.named(NamedColor[text.upper()])
        except KeyError as e:
            raise ColorError(value) from e

    def serialize(self) -> str:
        if self.transparent:
            return "transparent"
        return f"rgb({self.red},{self.green},{self.blue})"

    def __str__(self) -> str:
        return self.serialize()


def as_color(value: "Color | NamedColor") -> Color:
    """Coerce a palette entry to a Color, passing Colors through."""
    if isinstance(value, Color):
        return value
    return Color.named(value)


@dataclass
class Fill:
    """Interior paint of a shape."""

    color: Color = field(default_factory=Color.none)

    def __post_init__(self) -> None:
        self.color = as_color(self.color)

    def serialize(self) -> str:
        return attribute("fill", self.color.serialize())


@dataclass
class Stroke:
    """Outline paint of a shape.

    A negative width means "no stroke" and serializes to an empty string.

    Attributes:
        width: Stroke width in user units (negative disables the stroke)
        color: Stroke color
        non_scaling: Emit ``vector-effect="non-scaling-stroke"``
    """

    width: float = -1.0
    color: Color = field(default_factory=Color.none)
    non_scaling: bool = False

    def __post_init__(self) -> None:
        self.color = as_color(self.color)

    @property
    def is_visible(self) -> bool:
        return self.width >= 0

    def serialize(self) -> str:
        if not self.is_visible:
            return ""

        text = attribute("stroke-width", self.width) + attribute("stroke", self.color.serialize())
        if self.non_scaling:
            text += attribute("vector-effect", "non-scaling-stroke")
        return text


@dataclass
class Font:
    """Font used by text shapes."""

    size: float = 12.0
    family: str = "Verdana"

    def serialize(self) -> str:
        return attribute("font-size", self.size) + attribute("font-family", self.family)


def as_fill(value: "Fill | Color | NamedColor") -> Fill:
    """Coerce a color or palette entry to a Fill, passing Fills through."""
    if isinstance(value, Fill):
        return value
    return Fill(as_color(value))
